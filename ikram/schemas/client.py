import uuid
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, ConfigDict


class ClientCreate(BaseModel):
    """Yeni musteri olusturmak icin"""
    name: str = Field(min_length=1, max_length=255)
    phone: str = Field(min_length=1, max_length=50)
    secondary_phone: str | None = None
    email: EmailStr | None = None
    address: str | None = None
    company_name: str | None = None
    notes: str | None = None


class ClientUpdate(BaseModel):
    """Musteri guncellemek icin. Tum alanlar opsiyonel (partial update)."""
    name: str | None = Field(default=None, min_length=1, max_length=255)
    phone: str | None = Field(default=None, min_length=1, max_length=50)
    secondary_phone: str | None = None
    email: EmailStr | None = None
    address: str | None = None
    company_name: str | None = None
    notes: str | None = None


class ClientResponse(BaseModel):
    """Musteri bilgisi dondurmek icin"""
    id: uuid.UUID
    name: str
    phone: str
    secondary_phone: str | None
    email: str | None
    address: str | None
    company_name: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ClientListResponse(BaseModel):
    """Musteri listesi icin (sayfalama destekli)"""
    items: list[ClientResponse]
    total: int
    page: int
    size: int
