import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import String, Text, DateTime, ForeignKey, Numeric, Integer, Boolean
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from ikram.database import Base


class Package(Base):
    """
    Hizmet paketi (ornek: "Altin Dugun Paketi").
    Menu ve hizmet kalemlerinden olusur, teklif doldurmak icin kullanilir.
    """

    __tablename__ = "packages"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4
    )
    owner_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(
        String(255), nullable=False
    )
    description: Mapped[str | None] = mapped_column(
        Text, nullable=True
    )
    # Kisi basi fiyat (opsiyonel, sadece gosterim icin)
    base_price_per_person: Mapped[Decimal | None] = mapped_column(
        Numeric(12, 2), nullable=True
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, default=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    items: Mapped[list["PackageItem"]] = relationship(
        back_populates="package",
        cascade="all, delete-orphan",
        order_by="PackageItem.sort_order",
    )


class PackageItem(Base):
    """
    Paket kalemi. Teklif kalemi ile ayni yapida, miktar yerine
    misafir sayisina gore carpan (quantity_multiplier) tutar.
    """

    __tablename__ = "package_items"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4
    )
    package_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("packages.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # menu_item veya service
    item_type: Mapped[str] = mapped_column(
        String(20), nullable=False
    )
    item_name: Mapped[str] = mapped_column(
        String(255), nullable=False
    )
    description: Mapped[str | None] = mapped_column(
        Text, nullable=True
    )
    unit_price: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False
    )
    quantity_multiplier: Mapped[Decimal] = mapped_column(
        Numeric(10, 2), default=Decimal("1.00")
    )
    sort_order: Mapped[int] = mapped_column(
        Integer, default=0
    )

    package: Mapped["Package"] = relationship(back_populates="items")
