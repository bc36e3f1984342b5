import uuid
from datetime import datetime

from sqlalchemy import String, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from ikram.database import Base


class User(Base):
    """
    Admin kullanici modeli.
    Yonetim paneline giris yapan isletme personelini temsil eder.
    Teklifler, musteriler ve ayarlar bir kullaniciya (owner) aittir.
    """

    __tablename__ = "users"

    # Primary key: UUID kullaniyoruz (tahmin edilemez, guvenli)
    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4
    )

    # Email: benzersiz olmali, index ile hizli arama
    email: Mapped[str] = mapped_column(
        String(255), unique=True, index=True, nullable=False
    )

    # Sifre: hashlenmis hali saklanir, asla duz metin degil!
    hashed_password: Mapped[str] = mapped_column(
        String(255), nullable=False
    )

    full_name: Mapped[str] = mapped_column(
        String(255), nullable=False
    )

    # Hesap kapatildiysa False yapilir
    is_active: Mapped[bool] = mapped_column(
        Boolean, default=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Iliski: Bu kullanicinin musterileri
    clients: Mapped[list["Client"]] = relationship(
        back_populates="owner", cascade="all, delete-orphan"
    )
