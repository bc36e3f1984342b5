from decimal import Decimal

from pydantic import BaseModel, Field, ConfigDict


class CompanySettingsUpdate(BaseModel):
    """Isletme ayarlari. Gonderilmeyen alanlar degismez."""
    business_name: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    address: str | None = None
    gst_number: str | None = Field(default=None, max_length=50)
    website: str | None = Field(default=None, max_length=255)
    bank_name: str | None = Field(default=None, max_length=255)
    account_number: str | None = Field(default=None, max_length=50)
    ifsc_code: str | None = Field(default=None, max_length=20)
    upi_id: str | None = Field(default=None, max_length=100)
    default_tax_rate: Decimal | None = Field(default=None, ge=0, le=100)
    default_terms: str | None = None


class CompanySettingsResponse(BaseModel):
    business_name: str
    email: str
    phone: str
    address: str
    gst_number: str | None
    website: str | None
    bank_name: str | None
    account_number: str | None
    ifsc_code: str | None
    upi_id: str | None
    default_tax_rate: Decimal
    default_terms: str | None

    model_config = ConfigDict(from_attributes=True)
