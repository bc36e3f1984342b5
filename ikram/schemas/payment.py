import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, ConfigDict


class PaymentCreate(BaseModel):
    quotation_id: uuid.UUID
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    payment_type: Literal["advance", "partial", "full", "refund"] = "advance"
    payment_method: Literal["cash", "card", "upi", "bank_transfer", "razorpay"] = "cash"
    payment_status: Literal["pending", "completed", "failed", "refunded"] = "completed"
    transaction_reference: str | None = Field(default=None, max_length=255)
    payment_date: date | None = None
    notes: str | None = None


class PaymentQuotationSummary(BaseModel):
    """Odeme listesinde gosterilen teklif ozeti."""
    id: uuid.UUID
    quotation_number: str
    client_name: str
    grand_total: Decimal

    model_config = ConfigDict(from_attributes=True)


class PaymentResponse(BaseModel):
    id: uuid.UUID
    quotation_id: uuid.UUID
    amount: Decimal
    payment_type: str
    payment_method: str
    payment_status: str
    transaction_reference: str | None
    payment_date: date | None
    notes: str | None
    created_at: datetime
    quotation: PaymentQuotationSummary | None = None

    model_config = ConfigDict(from_attributes=True)
