"""
Herkese acik teklif gorunumu semalari.
Musteri, teklif linkini acarak teklifi gorur ve kabul/red cevabi verir.
Dahili alanlar (notes, owner, versiyon) bu semalarda yer almaz.
"""
import uuid
from datetime import date
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, ConfigDict

from ikram.schemas.quotation import ClientResponseRecord, QuotationTotalsResponse


class PublicQuotationItem(BaseModel):
    item_type: str
    item_name: str
    description: str | None
    unit_price: Decimal
    quantity: int
    total: Decimal

    model_config = ConfigDict(from_attributes=True)


class PublicQuotationView(BaseModel):
    """Musterinin gordugu teklif."""
    id: uuid.UUID
    quotation_number: str
    client_name: str
    event_date: date
    service_date: date | None
    event_type: str
    event_venue: str | None
    number_of_guests: int
    discount_percentage: Decimal
    tax_percentage: Decimal
    service_charges: Decimal
    external_charges: Decimal
    status: str
    valid_until: date | None
    remarks: str | None
    terms_and_conditions: str | None
    items: list[PublicQuotationItem] = []
    totals: QuotationTotalsResponse
    latest_response: ClientResponseRecord | None = None
    # Kabul/red edilmis tekliflere yeni cevap verilemez
    can_respond: bool


class ClientResponseCreate(BaseModel):
    """Musteri cevabi: kabul veya red, istege bagli mesaj."""
    response_type: Literal["accepted", "rejected"]
    response_message: str | None = Field(default=None, max_length=2000)
