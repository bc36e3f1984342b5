import uuid
from datetime import datetime, date
from decimal import Decimal

from sqlalchemy import String, Text, DateTime, Date, ForeignKey, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from ikram.database import Base


class Expense(Base):
    """
    Siparis gider kaydi.
    Onaylanmis bir teklif (siparis) icin yapilan dahili, harici veya
    cesitli giderleri takip eder.
    """

    __tablename__ = "expenses"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4
    )
    owner_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    quotation_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("quotations.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # internal, external, miscellaneous
    category: Mapped[str] = mapped_column(
        String(20), nullable=False, index=True
    )
    description: Mapped[str] = mapped_column(
        String(255), nullable=False
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False
    )
    expense_date: Mapped[date] = mapped_column(
        Date, nullable=False
    )
    notes: Mapped[str | None] = mapped_column(
        Text, nullable=True
    )
    # Fatura/fis belgesinin adresi (opsiyonel)
    document_url: Mapped[str | None] = mapped_column(
        String(500), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    quotation: Mapped["Quotation"] = relationship()
