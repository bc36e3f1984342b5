"""
Teklif modeli.
Musteriye gonderilen fiyat teklifini, kalemlerini, musteri cevaplarini
ve duzenleme gecmisini temsil eder.
"""
import uuid
from datetime import datetime, date, timezone
from decimal import Decimal

from sqlalchemy import String, Text, DateTime, Date, ForeignKey, Numeric, Integer, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from ikram.database import Base


class Quotation(Base):
    """
    Teklif modeli.
    Musteri ve etkinlik bilgilerini, fiyat girdilerini ve hesaplanan
    tutarlari tutar. Hesaplanan alanlar her kayitta services.pricing
    ile yeniden uretilir.
    """

    __tablename__ = "quotations"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4
    )
    owner_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # Kayitli musteriye baglanti (opsiyonel, bilgiler asagida kopyalanir)
    client_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("clients.id", ondelete="SET NULL"), nullable=True, index=True
    )

    # Ornek: QUOTE-0001
    quotation_number: Mapped[str] = mapped_column(
        String(50), nullable=False, unique=True, index=True
    )

    # Musteri bilgileri
    client_name: Mapped[str] = mapped_column(String(255), nullable=False)
    client_phone: Mapped[str] = mapped_column(String(50), nullable=False)
    client_email: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Etkinlik bilgileri
    event_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    service_date: Mapped[date | None] = mapped_column(Date, nullable=True, index=True)
    event_type: Mapped[str] = mapped_column(String(100), nullable=False)
    event_venue: Mapped[str | None] = mapped_column(Text, nullable=True)
    number_of_guests: Mapped[int] = mapped_column(Integer, default=0)

    # Fiyat girdileri
    discount_percentage: Mapped[Decimal] = mapped_column(
        Numeric(5, 2), default=Decimal("0.00")
    )
    tax_percentage: Mapped[Decimal] = mapped_column(
        Numeric(5, 2), default=Decimal("0.00")
    )
    service_charges: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00")
    )
    external_charges: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00")
    )
    advance_paid: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00")
    )

    # Hesaplanan tutarlar
    subtotal: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00")
    )
    discount_amount: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00")
    )
    tax_amount: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00")
    )
    # subtotal + service_charges + external_charges (indirim ve vergi oncesi)
    total_charges: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00")
    )
    grand_total: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00")
    )
    # Fazla odemede negatif olabilir
    balance_due: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00")
    )
    # pending, partial, paid
    payment_status: Mapped[str] = mapped_column(
        String(20), default="pending"
    )

    # Durum: draft, sent, accepted, rejected
    status: Mapped[str] = mapped_column(
        String(20), default="draft", index=True
    )
    # Onay durumu: draft, pending, approved, revised
    approval_status: Mapped[str] = mapped_column(
        String(20), default="draft", index=True
    )
    approved_by: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    approved_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    # Fiyat veya kalem degisikliginde artar (bkz. QuotationVersion)
    version: Mapped[int] = mapped_column(Integer, default=1)
    validity_days: Mapped[int] = mapped_column(Integer, default=30)

    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Dahili not, musteriye gosterilmez
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    terms_and_conditions: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Iliskiler
    owner: Mapped["User"] = relationship(foreign_keys=[owner_id])
    client: Mapped["Client | None"] = relationship()
    items: Mapped[list["QuotationItem"]] = relationship(
        back_populates="quotation",
        cascade="all, delete-orphan",
        order_by="QuotationItem.sort_order",
    )
    responses: Mapped[list["QuotationResponse"]] = relationship(
        back_populates="quotation",
        cascade="all, delete-orphan",
        order_by="QuotationResponse.responded_at",
    )
    versions: Mapped[list["QuotationVersion"]] = relationship(
        back_populates="quotation",
        cascade="all, delete-orphan",
        order_by="QuotationVersion.version",
    )

    @property
    def latest_response(self) -> "QuotationResponse | None":
        """Musteriye gosterilen son cevap."""
        return self.responses[-1] if self.responses else None


class QuotationItem(Base):
    """
    Teklif kalemi.
    Ornek: "Veg Biryani" 500 x 100 kisi = 50000
    Teklif her kaydedildiginde kalemler tamamen silinip yeniden eklenir.
    """

    __tablename__ = "quotation_items"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4
    )
    quotation_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("quotations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # menu_item veya service
    item_type: Mapped[str] = mapped_column(String(20), nullable=False)
    item_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, default=1)
    # unit_price * quantity
    total: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    quotation: Mapped["Quotation"] = relationship(back_populates="items")


class QuotationResponse(Base):
    """
    Musterinin kabul/red cevabi. Sadece eklenir, guncellenmez.
    Guncel durum her zaman Quotation.status alanindadir.
    """

    __tablename__ = "quotation_responses"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4
    )
    quotation_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("quotations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # accepted veya rejected
    response_type: Mapped[str] = mapped_column(String(20), nullable=False)
    response_message: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Ayni saniyedeki cevaplar da sirali kalsin diye Python tarafinda atanir
    responded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    quotation: Mapped["Quotation"] = relationship(back_populates="responses")


class QuotationVersion(Base):
    """
    Teklif duzenleme gecmisi.
    Fiyat girdileri veya kalemler degismeden once teklifin anlik goruntusu
    (JSON) saklanir.
    """

    __tablename__ = "quotation_versions"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4
    )
    quotation_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("quotations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    quotation_data: Mapped[dict] = mapped_column(JSON, nullable=False)
    edited_by: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    edit_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    changes_summary: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    quotation: Mapped["Quotation"] = relationship(back_populates="versions")
