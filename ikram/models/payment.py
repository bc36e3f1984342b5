import uuid
from datetime import datetime, date
from decimal import Decimal

from sqlalchemy import String, Date, DateTime, Numeric, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from ikram.database import Base


class Payment(Base):
    """
    Odeme modeli.
    Bir teklife yapilan avans, ara, tam odemeyi veya iadeyi temsil eder.
    Teklifin advance_paid alanini degistirmez; o alan teklif formundan girilir.
    """

    __tablename__ = "payments"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4
    )
    owner_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    quotation_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("quotations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False
    )
    # advance, partial, full, refund
    payment_type: Mapped[str] = mapped_column(
        String(20), default="advance"
    )
    # cash, card, upi, bank_transfer, razorpay
    payment_method: Mapped[str] = mapped_column(
        String(20), default="cash"
    )
    # pending, completed, failed, refunded
    payment_status: Mapped[str] = mapped_column(
        String(20), default="completed"
    )
    # Havale/UPI referans numarasi
    transaction_reference: Mapped[str | None] = mapped_column(
        String(255), nullable=True
    )
    payment_date: Mapped[date | None] = mapped_column(
        Date, nullable=True
    )
    notes: Mapped[str | None] = mapped_column(
        Text, nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    quotation: Mapped["Quotation"] = relationship()
