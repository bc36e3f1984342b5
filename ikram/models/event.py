"""
Takvim etkinligi ve etkinlik gider modelleri.
Bir teklif kabul edildiginde otomatik olusturulurlar.
"""
import uuid
from datetime import datetime, date
from decimal import Decimal

from sqlalchemy import String, Text, DateTime, Date, ForeignKey, Numeric, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from ikram.database import Base


class CalendarEvent(Base):
    """
    Rezerve edilmis etkinlik.
    Musteri, etkinlik ve gelir bilgileri kabul aninda tekliften kopyalanir.
    """

    __tablename__ = "calendar_events"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4
    )
    owner_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # Teklif silinse de etkinlik kalir
    quotation_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("quotations.id", ondelete="SET NULL"), nullable=True, index=True
    )

    # Ornek: "Wedding - Rahul Sharma"
    event_name: Mapped[str] = mapped_column(String(255), nullable=False)
    event_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    event_type: Mapped[str] = mapped_column(String(100), default="Other")
    client_name: Mapped[str] = mapped_column(String(255), nullable=False)
    client_phone: Mapped[str] = mapped_column(String(50), nullable=False)
    venue: Mapped[str | None] = mapped_column(Text, nullable=True)
    guest_count: Mapped[int] = mapped_column(Integer, default=0)
    total_revenue: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00")
    )
    # Confirmed, In Progress, Completed, Cancelled
    status: Mapped[str] = mapped_column(String(20), default="Confirmed")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    quotation: Mapped["Quotation | None"] = relationship()
    expense: Mapped["EventExpense | None"] = relationship(
        back_populates="event", cascade="all, delete-orphan", uselist=False
    )


class EventExpense(Base):
    """
    Etkinlik kar/zarar takibi.
    total_expenses, profit ve profit_percentage alanlari kalemler her
    degistiginde services.event_expense tarafindan yeniden hesaplanir.
    """

    __tablename__ = "event_expenses"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4
    )
    owner_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    event_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("calendar_events.id", ondelete="CASCADE"), nullable=False, index=True
    )
    quotation_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("quotations.id", ondelete="SET NULL"), nullable=True, index=True
    )

    total_expenses: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00")
    )
    profit: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00")
    )
    profit_percentage: Mapped[Decimal] = mapped_column(
        Numeric(7, 2), default=Decimal("0.00")
    )
    # Pending, Partial, Complete
    status: Mapped[str] = mapped_column(String(20), default="Pending")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    event: Mapped["CalendarEvent"] = relationship(back_populates="expense")
    items: Mapped[list["EventExpenseItem"]] = relationship(
        back_populates="expense", cascade="all, delete-orphan"
    )


class EventExpenseItem(Base):
    """Etkinlik icin yapilan tek bir harcama (tedarikci, kategori, tutar)."""

    __tablename__ = "event_expense_items"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4
    )
    expense_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("event_expenses.id", ondelete="CASCADE"), nullable=False, index=True
    )
    vendor_name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Food, Decoration, Staff, Venue, Transport, Other
    category: Mapped[str] = mapped_column(String(20), default="Other")
    amount: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00")
    )
    payment_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    payment_method: Mapped[str | None] = mapped_column(String(50), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    expense: Mapped["EventExpense"] = relationship(back_populates="items")
