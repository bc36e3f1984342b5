"""
Menu katalog modelleri.
Kategoriler, menu kalemleri ve hazir menu sablonlari.
"""
import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import String, Text, DateTime, ForeignKey, Numeric, Integer, Boolean
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from ikram.database import Base


class MenuCategory(Base):
    """
    Menu kategorisi (ornek: Baslangiclar, Ana Yemek, Tatlilar).
    display_order: listelemede kullanilan siralama.
    """

    __tablename__ = "menu_categories"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True
    )
    description: Mapped[str | None] = mapped_column(
        Text, nullable=True
    )
    display_order: Mapped[int] = mapped_column(
        Integer, default=0
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    items: Mapped[list["MenuItem"]] = relationship(back_populates="category")


class MenuItem(Base):
    """
    Menu kalemi.
    Sablonlara ve tekliflere eklenebilen yemek kutuphanesi.
    Kategori silinirse kalem kategorisiz kalir (SET NULL).
    """

    __tablename__ = "menu_items"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4
    )
    category_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("menu_categories.id", ondelete="SET NULL"), nullable=True, index=True
    )

    name: Mapped[str] = mapped_column(
        String(255), nullable=False
    )
    description: Mapped[str | None] = mapped_column(
        Text, nullable=True
    )
    base_price: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00")
    )
    # Birim: "per person", "per plate", "per item"
    unit: Mapped[str] = mapped_column(
        String(50), default="per person"
    )
    is_vegetarian: Mapped[bool] = mapped_column(
        Boolean, default=True
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

    category: Mapped["MenuCategory | None"] = relationship(back_populates="items")


class MenuTemplate(Base):
    """
    Hazir menu sablonu (ornek: "Dugun Menusu - Temel").
    Yeni teklif olustururken kalemleri doldurmak icin kullanilir.
    """

    __tablename__ = "menu_templates"

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
    is_active: Mapped[bool] = mapped_column(
        Boolean, default=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    items: Mapped[list["MenuTemplateItem"]] = relationship(
        back_populates="template",
        cascade="all, delete-orphan",
        order_by="MenuTemplateItem.sort_order",
    )


class MenuTemplateItem(Base):
    """Sablondaki bir menu kalemi. quantity_multiplier misafir sayisi ile carpilir."""

    __tablename__ = "menu_template_items"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4
    )
    template_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("menu_templates.id", ondelete="CASCADE"), nullable=False, index=True
    )
    menu_item_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("menu_items.id", ondelete="CASCADE"), nullable=False
    )
    quantity_multiplier: Mapped[Decimal] = mapped_column(
        Numeric(10, 2), default=Decimal("1.00")
    )
    sort_order: Mapped[int] = mapped_column(
        Integer, default=0
    )

    template: Mapped["MenuTemplate"] = relationship(back_populates="items")
    menu_item: Mapped["MenuItem"] = relationship()
