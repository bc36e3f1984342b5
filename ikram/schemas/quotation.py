"""
Teklif (Quotation) Pydantic semalari.
Validasyon ve API response icin kullanilir.
"""
import uuid
from datetime import datetime, date
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, EmailStr, Field, ConfigDict

QuotationStatus = Literal["draft", "sent", "accepted", "rejected"]
ApprovalStatus = Literal["draft", "pending", "approved", "revised"]


class QuotationItemCreate(BaseModel):
    """Teklif kalemi olusturma semasi."""
    item_type: Literal["menu_item", "service"] = "menu_item"
    item_name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    unit_price: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    quantity: int = Field(default=1, ge=0)


class QuotationItemResponse(BaseModel):
    """Teklif kalemi response semasi."""
    id: uuid.UUID
    item_type: str
    item_name: str
    description: str | None
    unit_price: Decimal
    quantity: int
    total: Decimal
    sort_order: int

    model_config = ConfigDict(from_attributes=True)


class PricingInput(BaseModel):
    """Fiyat girdileri. Onizleme ve kayit ayni alanlari kullanir."""
    items: list[QuotationItemCreate] = []
    discount_percentage: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    # None ise isletme ayarlarindaki varsayilan vergi orani kullanilir
    tax_percentage: Decimal | None = Field(default=None, ge=0, le=100)
    service_charges: Decimal = Field(default=Decimal("0"), ge=0)
    external_charges: Decimal = Field(default=Decimal("0"), ge=0)
    advance_paid: Decimal = Field(default=Decimal("0"), ge=0)


class QuotationCreate(PricingInput):
    """Teklif olusturma semasi. Yeni teklif her zaman 'draft' baslar."""
    client_id: uuid.UUID | None = None
    client_name: str = Field(min_length=1, max_length=255)
    client_phone: str = Field(min_length=1, max_length=50)
    client_email: EmailStr | None = None
    event_date: date
    service_date: date | None = None
    event_type: str = Field(default="Wedding", min_length=1, max_length=100)
    event_venue: str | None = None
    number_of_guests: int = Field(default=0, ge=0)
    validity_days: int | None = Field(default=None, ge=1, le=365)
    remarks: str | None = None
    notes: str | None = None
    terms_and_conditions: str | None = None


class QuotationUpdate(QuotationCreate):
    """
    Teklif guncelleme semasi (tam kayit).
    Kalemler tamamen silinip yeniden eklenir.
    Durum degisiklikleri ayri endpoint'ten yapilir.
    """
    edit_reason: str | None = Field(default=None, max_length=500)


class QuotationStatusUpdate(BaseModel):
    status: QuotationStatus


class QuotationApprovalUpdate(BaseModel):
    approval_status: ApprovalStatus


class QuotationTotalsResponse(BaseModel):
    """Hesaplanan tutarlar (onizleme)."""
    subtotal: Decimal
    discount_amount: Decimal
    taxable_base: Decimal
    tax_amount: Decimal
    total_charges: Decimal
    grand_total: Decimal
    advance_paid: Decimal
    balance_due: Decimal
    payment_status: str


class ClientResponseRecord(BaseModel):
    """Musterinin kabul/red cevabi."""
    id: uuid.UUID
    response_type: str
    response_message: str | None
    responded_at: datetime

    model_config = ConfigDict(from_attributes=True)


class QuotationListItem(BaseModel):
    """Liste icin kisaltilmis teklif (kalemler dahil degil)."""
    id: uuid.UUID
    quotation_number: str
    client_name: str
    client_phone: str
    event_date: date
    event_type: str
    number_of_guests: int
    grand_total: Decimal
    balance_due: Decimal
    payment_status: str
    status: str
    approval_status: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class QuotationListResponse(BaseModel):
    items: list[QuotationListItem]
    total: int
    page: int
    size: int


class QuotationResponse(BaseModel):
    """Teklif detay semasi."""
    id: uuid.UUID
    client_id: uuid.UUID | None
    quotation_number: str
    client_name: str
    client_phone: str
    client_email: str | None
    event_date: date
    service_date: date | None
    event_type: str
    event_venue: str | None
    number_of_guests: int
    discount_percentage: Decimal
    tax_percentage: Decimal
    service_charges: Decimal
    external_charges: Decimal
    advance_paid: Decimal
    subtotal: Decimal
    discount_amount: Decimal
    tax_amount: Decimal
    total_charges: Decimal
    grand_total: Decimal
    balance_due: Decimal
    payment_status: str
    status: str
    approval_status: str
    approved_at: datetime | None
    version: int
    validity_days: int
    remarks: str | None
    notes: str | None
    terms_and_conditions: str | None
    items: list[QuotationItemResponse] = []
    latest_response: ClientResponseRecord | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class QuotationVersionResponse(BaseModel):
    id: uuid.UUID
    version: int
    quotation_data: dict
    edited_by: uuid.UUID | None
    edit_reason: str | None
    changes_summary: str | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PrefillItemsResponse(BaseModel):
    """Paket veya sablondan uretilen teklif kalemleri."""
    source: Literal["package", "template"]
    source_id: uuid.UUID
    number_of_guests: int
    items: list[QuotationItemCreate]
