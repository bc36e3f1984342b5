"""
Isletme ayarlari servisi.
Her kullanicinin tek bir ayar kaydi vardir; kayit yoksa varsayilanlar doner.
Teklif PDF'i, varsayilan vergi orani ve sartlar buradan okunur.
"""
import uuid
from decimal import Decimal

from sqlalchemy.orm import Session

from ikram.config import settings
from ikram.models.company import CompanySettings
from ikram.schemas.company import CompanySettingsUpdate
from ikram.services.activity import log_activity

DEFAULT_BUSINESS_NAME = "The Royal Catering Service & Events"


def _defaults(user_id: uuid.UUID) -> CompanySettings:
    """Kaydedilmemis, varsayilan degerli ayar nesnesi."""
    return CompanySettings(
        user_id=user_id,
        business_name=DEFAULT_BUSINESS_NAME,
        email="",
        phone="",
        address="",
        gst_number="",
        website="",
        bank_name="",
        account_number="",
        ifsc_code="",
        upi_id="",
        default_tax_rate=Decimal(str(settings.DEFAULT_TAX_RATE)),
        default_terms=settings.DEFAULT_TERMS,
    )


def get_company_settings(db: Session, user_id: uuid.UUID) -> CompanySettings:
    """Kayitli ayarlar; yoksa varsayilanlar (veritabanina yazilmaz)."""
    company = db.query(CompanySettings).filter(
        CompanySettings.user_id == user_id
    ).first()
    return company or _defaults(user_id)


def upsert_company_settings(
    db: Session, user_id: uuid.UUID, data: CompanySettingsUpdate
) -> CompanySettings:
    """Ayar kaydi yoksa olusturur, varsa sadece gonderilen alanlari gunceller."""
    company = db.query(CompanySettings).filter(
        CompanySettings.user_id == user_id
    ).first()
    if company is None:
        company = _defaults(user_id)
        db.add(company)

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(company, field, value)

    db.flush()
    log_activity(
        db, user_id, "update", "company_settings", company.id,
        "Isletme ayarlari guncellendi",
    )
    db.commit()
    db.refresh(company)
    return company


def default_tax_rate(db: Session, user_id: uuid.UUID) -> Decimal:
    return Decimal(get_company_settings(db, user_id).default_tax_rate)


def default_terms(db: Session, user_id: uuid.UUID) -> str | None:
    return get_company_settings(db, user_id).default_terms
