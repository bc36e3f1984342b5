"""
Teklif (Quotation) servis katmani.
Teklif CRUD islemleri, numaralama, versiyon gecmisi ve paket/sablondan
kalem doldurma. Tutarlar her zaman services.pricing ile hesaplanir.
Durum ve onay degisiklikleri services.lifecycle icindedir.
"""
import re
import uuid
import logging
from datetime import date, datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy import or_
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ikram.config import settings
from ikram.models.quotation import Quotation, QuotationItem, QuotationVersion
from ikram.schemas.quotation import (
    PricingInput, QuotationCreate, QuotationItemCreate, QuotationUpdate,
)
from ikram.services import company as company_service
from ikram.services import client as client_service
from ikram.services import menu as menu_service
from ikram.services import package as package_service
from ikram.services.activity import log_activity
from ikram.services.pricing import (
    QuotationTotals, apply_totals, calculate_totals, line_total, totals_for_quotation,
)

logger = logging.getLogger(__name__)

NUMBER_PREFIX = "QUOTE-"
_NUMBER_PATTERN = re.compile(r"^QUOTE-(\d+)$")

# Degistiginde yeni versiyon acilan alanlar
PRICING_FIELDS = (
    "discount_percentage", "tax_percentage",
    "service_charges", "external_charges", "advance_paid",
)


def _generate_quotation_number(db: Session) -> str:
    """
    Otomatik teklif numarasi: QUOTE-0001, QUOTE-0002, ...
    Tum tekliflerdeki (numara kolonu benzersiz) en buyuk numaranin bir fazlasi;
    aradan silinen numaralarin boslugu doldurulmaz.
    """
    numbers = db.query(Quotation.quotation_number).filter(
        Quotation.quotation_number.like(f"{NUMBER_PREFIX}%")
    ).all()
    highest = 0
    for (number,) in numbers:
        match = _NUMBER_PATTERN.match(number)
        if match:
            highest = max(highest, int(match.group(1)))
    return f"{NUMBER_PREFIX}{highest + 1:04d}"


def get_next_quotation_number(db: Session) -> str:
    """Siradaki teklif numarasini dondur (onizleme icin)."""
    return _generate_quotation_number(db)


def _build_items(items_data: list[QuotationItemCreate]) -> list[QuotationItem]:
    """Kalem semalarindan model nesneleri; sira gonderim sirasidir."""
    return [
        QuotationItem(
            item_type=item.item_type,
            item_name=item.item_name,
            description=item.description,
            unit_price=item.unit_price,
            quantity=item.quantity,
            total=line_total(item.unit_price, item.quantity),
            sort_order=index,
        )
        for index, item in enumerate(items_data)
    ]


def _resolve_tax(db: Session, owner_id: uuid.UUID, data: PricingInput) -> Decimal:
    if data.tax_percentage is not None:
        return data.tax_percentage
    return company_service.default_tax_rate(db, owner_id)


def preview_totals(db: Session, owner_id: uuid.UUID, data: PricingInput) -> QuotationTotals:
    """Kaydetmeden tutarlari hesapla (form onizlemesi)."""
    return calculate_totals(
        data.items,
        discount_percentage=data.discount_percentage,
        tax_percentage=_resolve_tax(db, owner_id, data),
        service_charges=data.service_charges,
        external_charges=data.external_charges,
        advance_paid=data.advance_paid,
    )


def valid_until(quotation: Quotation) -> date | None:
    """Teklifin son gecerlilik tarihi (olusturma + validity_days)."""
    if quotation.created_at is None:
        return None
    return quotation.created_at.date() + timedelta(days=quotation.validity_days or 0)


def get_quotations(
    db: Session, owner_id: uuid.UUID,
    page: int = 1, size: int = 20,
    search: str | None = None,
    status_filter: str | None = None,
    approval_filter: str | None = None,
    sort: str | None = None,
) -> tuple[list[Quotation], int]:
    """
    Teklif listesini sayfalama ile dondur.
    Arama: teklif numarasi, musteri adi veya telefonunda arar.
    Siralama: etkinlik tarihi, tutar veya varsayilan (olusturma, yeni once).
    Dondurur: (teklif_listesi, toplam_sayi)
    """
    query = db.query(Quotation).filter(Quotation.owner_id == owner_id)

    if search:
        search_term = f"%{search}%"
        query = query.filter(
            or_(
                Quotation.quotation_number.ilike(search_term),
                Quotation.client_name.ilike(search_term),
                Quotation.client_phone.ilike(search_term),
            )
        )
    if status_filter:
        query = query.filter(Quotation.status == status_filter)
    if approval_filter:
        query = query.filter(Quotation.approval_status == approval_filter)

    total = query.count()

    if sort == "date_asc":
        query = query.order_by(Quotation.event_date.asc())
    elif sort == "date_desc":
        query = query.order_by(Quotation.event_date.desc())
    elif sort == "total_asc":
        query = query.order_by(Quotation.grand_total.asc())
    elif sort == "total_desc":
        query = query.order_by(Quotation.grand_total.desc())
    else:
        query = query.order_by(Quotation.created_at.desc(), Quotation.quotation_number.desc())

    quotations = query.offset((page - 1) * size).limit(size).all()
    return quotations, total


def get_quotation(db: Session, quotation_id: uuid.UUID, owner_id: uuid.UUID) -> Quotation:
    """Tek bir teklifi getir. Bulunamazsa 404 dondurur."""
    quotation = db.query(Quotation).filter(
        Quotation.id == quotation_id, Quotation.owner_id == owner_id
    ).first()
    if not quotation:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Teklif bulunamadi"
        )
    return quotation


def _apply_header(db: Session, quotation: Quotation, owner_id: uuid.UUID, data: QuotationCreate) -> None:
    """Musteri/etkinlik/fiyat girdisi alanlarini teklife yaz."""
    if data.client_id is not None:
        client_service.get_client(db, data.client_id, owner_id)
    quotation.client_id = data.client_id
    quotation.client_name = data.client_name
    quotation.client_phone = data.client_phone
    quotation.client_email = data.client_email
    quotation.event_date = data.event_date
    quotation.service_date = data.service_date
    quotation.event_type = data.event_type
    quotation.event_venue = data.event_venue
    quotation.number_of_guests = data.number_of_guests
    quotation.discount_percentage = data.discount_percentage
    quotation.tax_percentage = _resolve_tax(db, owner_id, data)
    quotation.service_charges = data.service_charges
    quotation.external_charges = data.external_charges
    quotation.advance_paid = data.advance_paid
    quotation.validity_days = data.validity_days or settings.DEFAULT_VALIDITY_DAYS
    quotation.remarks = data.remarks
    quotation.notes = data.notes
    if data.terms_and_conditions is not None:
        quotation.terms_and_conditions = data.terms_and_conditions
    elif quotation.terms_and_conditions is None:
        quotation.terms_and_conditions = company_service.default_terms(db, owner_id)


def create_quotation(db: Session, owner_id: uuid.UUID, data: QuotationCreate) -> Quotation:
    """
    Yeni teklif olustur.
    Otomatik numara atar, kalemlerin ve teklifin toplamlarini hesaplar.
    """
    quotation = Quotation(
        owner_id=owner_id,
        quotation_number=_generate_quotation_number(db),
        status="draft",
        approval_status="draft",
        version=1,
    )
    _apply_header(db, quotation, owner_id, data)
    quotation.items = _build_items(data.items)
    apply_totals(quotation, totals_for_quotation(quotation))

    db.add(quotation)
    db.flush()
    log_activity(
        db, owner_id, "create", "quotation", quotation.id,
        f"Teklif '{quotation.quotation_number}' olusturuldu ({quotation.client_name})",
    )
    db.commit()
    db.refresh(quotation)
    logger.info("Teklif olusturuldu: %s", quotation.quotation_number)
    return quotation


def _json_value(value):
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, uuid.UUID):
        return str(value)
    return value


def _snapshot(quotation: Quotation) -> dict:
    """Versiyon gecmisi icin teklifin JSON uyumlu anlik goruntusu."""
    header_fields = (
        "quotation_number", "client_name", "client_phone", "client_email",
        "event_date", "service_date", "event_type", "event_venue",
        "number_of_guests", *PRICING_FIELDS,
        "subtotal", "discount_amount", "tax_amount", "grand_total", "balance_due",
        "status", "approval_status", "version",
    )
    data = {field: _json_value(getattr(quotation, field)) for field in header_fields}
    data["items"] = [
        {
            "item_type": item.item_type,
            "item_name": item.item_name,
            "description": item.description,
            "unit_price": _json_value(item.unit_price),
            "quantity": item.quantity,
            "total": _json_value(item.total),
        }
        for item in quotation.items
    ]
    return data


def _as_money(value) -> Decimal:
    return Decimal(value or 0).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def _pricing_changes(db: Session, quotation: Quotation, owner_id: uuid.UUID, data: QuotationUpdate) -> list[str]:
    """Fiyat girdisi ve kalem farklarini insan okunur liste olarak dondur."""
    changes = []
    incoming = {
        "discount_percentage": data.discount_percentage,
        "tax_percentage": _resolve_tax(db, owner_id, data),
        "service_charges": data.service_charges,
        "external_charges": data.external_charges,
        "advance_paid": data.advance_paid,
    }
    for field in PRICING_FIELDS:
        old, new = _as_money(getattr(quotation, field)), _as_money(incoming[field])
        if old != new:
            changes.append(f"{field}: {old} -> {new}")

    old_items = [
        (i.item_type, i.item_name, _as_money(i.unit_price), i.quantity)
        for i in quotation.items
    ]
    new_items = [
        (i.item_type, i.item_name, _as_money(i.unit_price), i.quantity)
        for i in data.items
    ]
    if old_items != new_items:
        changes.append(f"kalemler: {len(old_items)} -> {len(new_items)}")
    return changes


def update_quotation(
    db: Session, quotation_id: uuid.UUID, owner_id: uuid.UUID, data: QuotationUpdate
) -> Quotation:
    """
    Teklifi tam kayit olarak guncelle.
    Kalemler tamamen silinip yeniden eklenir, toplamlar yeniden hesaplanir.
    Fiyat girdileri veya kalemler degistiyse onceki hali QuotationVersion
    olarak saklanir ve version bir artar.
    """
    quotation = get_quotation(db, quotation_id, owner_id)

    changes = _pricing_changes(db, quotation, owner_id, data)
    if changes:
        db.add(
            QuotationVersion(
                quotation_id=quotation.id,
                version=quotation.version,
                quotation_data=_snapshot(quotation),
                edited_by=owner_id,
                edit_reason=data.edit_reason,
                changes_summary="; ".join(changes),
            )
        )
        quotation.version = (quotation.version or 1) + 1

    _apply_header(db, quotation, owner_id, data)
    quotation.items.clear()
    db.flush()
    quotation.items.extend(_build_items(data.items))
    apply_totals(quotation, totals_for_quotation(quotation))

    log_activity(
        db, owner_id, "update", "quotation", quotation.id,
        f"Teklif '{quotation.quotation_number}' guncellendi"
        + (f" (versiyon {quotation.version})" if changes else ""),
    )
    db.commit()
    db.refresh(quotation)
    return quotation


def delete_quotation(db: Session, quotation_id: uuid.UUID, owner_id: uuid.UUID) -> None:
    """
    Teklifi sil. Kalemler, cevaplar ve versiyonlar birlikte silinir.
    Olusturulmus takvim etkinligi ve giderleri kalir.
    """
    quotation = get_quotation(db, quotation_id, owner_id)
    quotation_number = quotation.quotation_number
    db.delete(quotation)
    log_activity(
        db, owner_id, "delete", "quotation", quotation_id,
        f"Teklif '{quotation_number}' silindi",
    )
    db.commit()


def get_versions(
    db: Session, quotation_id: uuid.UUID, owner_id: uuid.UUID
) -> list[QuotationVersion]:
    quotation = get_quotation(db, quotation_id, owner_id)
    return list(quotation.versions)


# ---------------------------------------------------------------------------
# Paket / sablondan kalem doldurma
# ---------------------------------------------------------------------------

def _scaled_quantity(multiplier, guests: int) -> int:
    """Carpan x misafir sayisi, en yakin tam sayiya yuvarlanir."""
    quantity = Decimal(multiplier) * Decimal(guests)
    return int(quantity.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def prefill_from_package(
    db: Session, package_id: uuid.UUID, owner_id: uuid.UUID, guests: int
) -> list[QuotationItemCreate]:
    package = package_service.get_package(db, package_id, owner_id)
    return [
        QuotationItemCreate(
            item_type=item.item_type,
            item_name=item.item_name,
            description=item.description,
            unit_price=item.unit_price,
            quantity=_scaled_quantity(item.quantity_multiplier, guests),
        )
        for item in package.items
    ]


def prefill_from_template(
    db: Session, template_id: uuid.UUID, owner_id: uuid.UUID, guests: int
) -> list[QuotationItemCreate]:
    """Sablondaki aktif menu kalemleri, guncel taban fiyatlariyla."""
    template = menu_service.get_template(db, template_id, owner_id)
    return [
        QuotationItemCreate(
            item_type="menu_item",
            item_name=entry.menu_item.name,
            description=entry.menu_item.description,
            unit_price=entry.menu_item.base_price,
            quantity=_scaled_quantity(entry.quantity_multiplier, guests),
        )
        for entry in template.items
        if entry.menu_item.is_active
    ]
