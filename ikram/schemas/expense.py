import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, ConfigDict

ExpenseCategory = Literal["internal", "external", "miscellaneous"]


class ExpenseCreate(BaseModel):
    """Siparis icin yeni gider kaydi"""
    quotation_id: uuid.UUID
    category: ExpenseCategory = "internal"
    description: str = Field(min_length=1, max_length=255)
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    expense_date: date | None = None
    notes: str | None = None
    document_url: str | None = Field(default=None, max_length=500)


class ExpenseUpdate(BaseModel):
    """Gider kaydini guncellemek icin. Tum alanlar opsiyonel (partial update)."""
    category: ExpenseCategory | None = None
    description: str | None = Field(default=None, min_length=1, max_length=255)
    amount: Decimal | None = Field(default=None, gt=0, max_digits=12, decimal_places=2)
    expense_date: date | None = None
    notes: str | None = None
    document_url: str | None = Field(default=None, max_length=500)


class ExpenseResponse(BaseModel):
    id: uuid.UUID
    quotation_id: uuid.UUID
    category: str
    description: str
    amount: Decimal
    expense_date: date
    notes: str | None
    document_url: str | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ExpenseListResponse(BaseModel):
    """Gider listesi icin (sayfalama destekli)"""
    items: list[ExpenseResponse]
    total: int
    page: int
    size: int


class ExpenseSummary(BaseModel):
    """Kategori bazli gider toplamlari."""
    total: Decimal
    internal: Decimal
    external: Decimal
    miscellaneous: Decimal
