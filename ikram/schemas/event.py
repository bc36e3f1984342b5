import uuid
import datetime as dt
from datetime import date, datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, ConfigDict

EventStatus = Literal["Confirmed", "In Progress", "Completed", "Cancelled"]
ExpenseItemCategory = Literal["Food", "Decoration", "Staff", "Venue", "Transport", "Other"]


# --- Takvim Etkinligi ---

class CalendarEventUpdate(BaseModel):
    """Etkinlik guncelleme. Gelir alani teklif uzerinden belirlenir, buradan degismez."""
    event_name: str | None = Field(default=None, min_length=1, max_length=255)
    event_date: date | None = None
    venue: str | None = None
    guest_count: int | None = Field(default=None, ge=0)
    status: EventStatus | None = None
    notes: str | None = None


class CalendarEventResponse(BaseModel):
    id: uuid.UUID
    quotation_id: uuid.UUID | None
    event_name: str
    event_date: date
    event_type: str
    client_name: str
    client_phone: str
    venue: str | None
    guest_count: int
    total_revenue: Decimal
    status: str
    notes: str | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CalendarEntry(BaseModel):
    """Ay gorunumundeki tek bir kayit (etkinlik veya onayli teklif)."""
    date: dt.date
    type: Literal["event", "approved_quotation"]
    title: str
    status: str
    color: str
    url: str


# --- Etkinlik Giderleri ---

class EventExpenseItemCreate(BaseModel):
    vendor_name: str = Field(min_length=1, max_length=255)
    category: ExpenseItemCategory = "Other"
    amount: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    payment_date: date | None = None
    payment_method: str | None = Field(default=None, max_length=50)
    description: str | None = None


class EventExpenseItemUpdate(BaseModel):
    vendor_name: str | None = Field(default=None, min_length=1, max_length=255)
    category: ExpenseItemCategory | None = None
    amount: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    payment_date: date | None = None
    payment_method: str | None = Field(default=None, max_length=50)
    description: str | None = None


class EventExpenseItemResponse(BaseModel):
    id: uuid.UUID
    vendor_name: str
    category: str
    amount: Decimal
    payment_date: date | None
    payment_method: str | None
    description: str | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class EventExpenseUpdate(BaseModel):
    status: Literal["Pending", "Partial", "Complete"] | None = None
    notes: str | None = None


class EventExpenseResponse(BaseModel):
    id: uuid.UUID
    event_id: uuid.UUID
    quotation_id: uuid.UUID | None
    total_expenses: Decimal
    profit: Decimal
    profit_percentage: Decimal
    status: str
    notes: str | None
    items: list[EventExpenseItemResponse] = []
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
