import uuid
from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, ConfigDict


class PackageItemCreate(BaseModel):
    item_type: Literal["menu_item", "service"] = "menu_item"
    item_name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    unit_price: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    quantity_multiplier: Decimal = Field(default=Decimal("1"), ge=0)


class PackageCreate(BaseModel):
    """Paket olusturma/guncelleme. Kalemler her kayitta tamamen degistirilir."""
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    base_price_per_person: Decimal | None = Field(default=None, ge=0)
    is_active: bool = True
    items: list[PackageItemCreate] = []


class PackageItemResponse(BaseModel):
    id: uuid.UUID
    item_type: str
    item_name: str
    description: str | None
    unit_price: Decimal
    quantity_multiplier: Decimal
    sort_order: int

    model_config = ConfigDict(from_attributes=True)


class PackageResponse(BaseModel):
    id: uuid.UUID
    name: str
    description: str | None
    base_price_per_person: Decimal | None
    is_active: bool
    items: list[PackageItemResponse] = []
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
