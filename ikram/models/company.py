"""
Isletme ayarlari modeli.
PDF ciktilarinda ve yeni tekliflerin varsayilanlarinda kullanilir.
"""
import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import String, Text, DateTime, ForeignKey, Numeric
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from ikram.database import Base


class CompanySettings(Base):
    """Her kullanicinin tek bir ayar kaydi olabilir (user_id unique)."""

    __tablename__ = "company_settings"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True, index=True
    )

    business_name: Mapped[str] = mapped_column(
        String(255), default="The Royal Catering Service & Events"
    )
    email: Mapped[str] = mapped_column(String(255), default="")
    phone: Mapped[str] = mapped_column(String(50), default="")
    address: Mapped[str] = mapped_column(Text, default="")
    gst_number: Mapped[str | None] = mapped_column(String(50), default="")
    website: Mapped[str | None] = mapped_column(String(255), default="")

    # Banka / odeme bilgileri (PDF'te gosterilir)
    bank_name: Mapped[str | None] = mapped_column(String(255), default="")
    account_number: Mapped[str | None] = mapped_column(String(50), default="")
    ifsc_code: Mapped[str | None] = mapped_column(String(20), default="")
    upi_id: Mapped[str | None] = mapped_column(String(100), default="")

    default_tax_rate: Mapped[Decimal] = mapped_column(
        Numeric(5, 2), default=Decimal("18.00")
    )
    default_terms: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
