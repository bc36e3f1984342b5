import uuid
from datetime import datetime

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from ikram.database import Base


class Client(Base):
    """
    Musteri modeli.
    Ikram hizmeti alan kisi veya kurumlari temsil eder.
    Teklifler musteri bilgilerini kopyalar, bu yuzden musteri silinse de
    teklifler etkilenmez.
    """

    __tablename__ = "clients"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4
    )

    # ondelete="CASCADE": kullanici silinirse musterileri de silinir
    owner_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    name: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True
    )
    phone: Mapped[str] = mapped_column(
        String(50), nullable=False
    )
    secondary_phone: Mapped[str | None] = mapped_column(
        String(50), nullable=True
    )
    email: Mapped[str | None] = mapped_column(
        String(255), nullable=True
    )
    address: Mapped[str | None] = mapped_column(
        Text, nullable=True
    )
    # Kurumsal musteriler icin sirket adi
    company_name: Mapped[str | None] = mapped_column(
        String(255), nullable=True
    )
    # Dahili notlar (musteriye gosterilmez)
    notes: Mapped[str | None] = mapped_column(
        Text, nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    owner: Mapped["User"] = relationship(back_populates="clients")
