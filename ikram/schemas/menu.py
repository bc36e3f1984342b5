"""
Menu katalog Pydantic semalari (kategori, kalem, sablon).
"""
import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, ConfigDict


# --- Kategori Schemalari ---

class MenuCategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None
    display_order: int = Field(default=0, ge=0)


class MenuCategoryUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = None
    display_order: int | None = Field(default=None, ge=0)


class MenuCategoryResponse(BaseModel):
    id: uuid.UUID
    name: str
    description: str | None
    display_order: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- Menu Kalemi Schemalari ---

class MenuItemCreate(BaseModel):
    """Yeni menu kalemi. Kategori zorunlu."""
    category_id: uuid.UUID
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    base_price: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)
    unit: str = Field(default="per person", max_length=50)
    is_vegetarian: bool = True
    is_active: bool = True


class MenuItemUpdate(BaseModel):
    category_id: uuid.UUID | None = None
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    base_price: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    unit: str | None = Field(default=None, max_length=50)
    is_vegetarian: bool | None = None
    is_active: bool | None = None


class MenuItemResponse(BaseModel):
    id: uuid.UUID
    category_id: uuid.UUID | None
    name: str
    description: str | None
    base_price: Decimal
    unit: str
    is_vegetarian: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- Menu Sablonu Schemalari ---

class MenuTemplateItemCreate(BaseModel):
    menu_item_id: uuid.UUID
    quantity_multiplier: Decimal = Field(default=Decimal("1"), ge=0)


class MenuTemplateCreate(BaseModel):
    """Sablon olusturma/guncelleme. Kalemler her kayitta tamamen degistirilir."""
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    is_active: bool = True
    items: list[MenuTemplateItemCreate] = []


class MenuTemplateItemResponse(BaseModel):
    id: uuid.UUID
    menu_item_id: uuid.UUID
    quantity_multiplier: Decimal
    sort_order: int
    menu_item: MenuItemResponse

    model_config = ConfigDict(from_attributes=True)


class MenuTemplateResponse(BaseModel):
    id: uuid.UUID
    name: str
    description: str | None
    is_active: bool
    items: list[MenuTemplateItemResponse] = []
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
