"""
Teklif yasam dongusu.

Durum:  draft -> sent -> accepted | rejected
Onay:   draft -> pending -> approved | revised,  revised -> pending,  approved -> revised

Kabul edilen teklif icin ayni transaction icinde bir takvim etkinligi ve
bos bir etkinlik gider kaydi olusturulur. Herhangi bir adim basarisiz
olursa hicbiri kaydedilmez.
"""
import uuid
import logging
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ikram.models.event import CalendarEvent, EventExpense
from ikram.models.quotation import Quotation
from ikram.services.activity import log_activity
from ikram.services.quotation import get_quotation

logger = logging.getLogger(__name__)

STATUSES = ("draft", "sent", "accepted", "rejected")
CLOSED_STATUSES = ("accepted", "rejected")

STATUS_LABELS = {
    "draft": "Taslak",
    "sent": "Gonderildi",
    "accepted": "Kabul Edildi",
    "rejected": "Reddedildi",
}

APPROVAL_TRANSITIONS = {
    "draft": {"pending"},
    "pending": {"approved", "revised"},
    "revised": {"pending"},
    "approved": {"revised"},
}

APPROVAL_LABELS = {
    "draft": "Taslak",
    "pending": "Onay Bekliyor",
    "approved": "Onaylandi",
    "revised": "Revize Istendi",
}


def _create_booking(db: Session, quotation: Quotation) -> CalendarEvent | None:
    """
    Kabul edilen teklif icin etkinlik + gider kaydi ekle (commit yok).
    Teklif icin daha once etkinlik olusturulmussa yenisi eklenmez.
    """
    existing = db.query(CalendarEvent).filter(
        CalendarEvent.quotation_id == quotation.id
    ).first()
    if existing:
        logger.info(
            "Teklif %s icin etkinlik zaten var, yenisi olusturulmadi",
            quotation.quotation_number,
        )
        return None

    revenue = quotation.grand_total
    event = CalendarEvent(
        owner_id=quotation.owner_id,
        quotation_id=quotation.id,
        event_name=f"{quotation.event_type} - {quotation.client_name}",
        event_date=quotation.event_date,
        event_type=quotation.event_type,
        client_name=quotation.client_name,
        client_phone=quotation.client_phone,
        venue=quotation.event_venue,
        guest_count=quotation.number_of_guests,
        total_revenue=revenue,
        status="Confirmed",
    )
    # Kabulde gider yok: kar = gelir, kar orani her zaman %100
    event.expense = EventExpense(
        owner_id=quotation.owner_id,
        quotation_id=quotation.id,
        total_expenses=0,
        profit=revenue,
        profit_percentage=Decimal("100.00"),
        status="Pending",
    )
    db.add(event)
    db.flush()
    log_activity(
        db, quotation.owner_id, "create", "event", event.id,
        f"Etkinlik '{event.event_name}' teklif '{quotation.quotation_number}' kabulu ile olusturuldu",
    )
    return event


def apply_status(db: Session, quotation: Quotation, new_status: str) -> None:
    """
    Durumu degistir ve gerekiyorsa kabul yan etkilerini uygula.
    Commit cagirana aittir.
    """
    if new_status not in STATUSES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Gecersiz teklif durumu: {new_status}",
        )
    quotation.status = new_status
    if new_status == "accepted":
        _create_booking(db, quotation)


def commit_or_rollback(db: Session, context: str) -> None:
    """Tek commit; hata olursa tum degisiklikler geri alinir ve 500 doner."""
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("%s kaydedilemedi, islem geri alindi", context)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Islem kaydedilemedi, degisiklikler geri alindi",
        )


def update_status(
    db: Session, quotation_id: uuid.UUID, owner_id: uuid.UUID, new_status: str
) -> Quotation:
    """Admin tarafindan durum degisikligi. Her gecerli duruma gecilebilir."""
    quotation = get_quotation(db, quotation_id, owner_id)
    old_status = quotation.status

    try:
        apply_status(db, quotation, new_status)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Teklif %s durumu degistirilemedi", quotation.quotation_number)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Islem kaydedilemedi, degisiklikler geri alindi",
        )

    old_label = STATUS_LABELS.get(old_status, old_status)
    new_label = STATUS_LABELS.get(new_status, new_status)
    log_activity(
        db, owner_id, "status_change", "quotation", quotation.id,
        f"Teklif '{quotation.quotation_number}' durumu '{old_label}' -> '{new_label}' olarak degistirildi",
    )
    commit_or_rollback(db, f"Teklif {quotation.quotation_number} durum degisikligi")
    db.refresh(quotation)
    logger.info(
        "Teklif %s durumu: %s -> %s", quotation.quotation_number, old_status, new_status
    )
    return quotation


def share_quotation(db: Session, quotation_id: uuid.UUID, owner_id: uuid.UUID) -> Quotation:
    """
    Musteri linki olusturulunca taslak teklif 'sent' durumuna gecer;
    aksi halde link acildiginda teklif bulunamaz.
    """
    quotation = get_quotation(db, quotation_id, owner_id)
    if quotation.status != "draft":
        return quotation

    quotation.status = "sent"
    log_activity(
        db, owner_id, "status_change", "quotation", quotation.id,
        f"Teklif '{quotation.quotation_number}' musteri linki ile paylasildi "
        f"('{STATUS_LABELS['draft']}' -> '{STATUS_LABELS['sent']}')",
    )
    commit_or_rollback(db, f"Teklif {quotation.quotation_number} paylasimi")
    db.refresh(quotation)
    logger.info("Teklif %s musteriyle paylasildi", quotation.quotation_number)
    return quotation


def update_approval(
    db: Session, quotation_id: uuid.UUID, user_id: uuid.UUID, new_approval: str
) -> Quotation:
    """
    Onay durumunu degistir. Sadece izin verilen gecisler yapilabilir.
    Onaylanan teklifte onaylayan kullanici ve zaman kaydedilir.
    """
    quotation = get_quotation(db, quotation_id, user_id)
    old_approval = quotation.approval_status or "draft"

    if new_approval not in APPROVAL_TRANSITIONS.get(old_approval, set()):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=(
                f"Onay durumu '{APPROVAL_LABELS.get(old_approval, old_approval)}' -> "
                f"'{APPROVAL_LABELS.get(new_approval, new_approval)}' olarak degistirilemez"
            ),
        )

    quotation.approval_status = new_approval
    if new_approval == "approved":
        quotation.approved_by = user_id
        quotation.approved_at = datetime.now(timezone.utc)

    log_activity(
        db, user_id, "approval_change", "quotation", quotation.id,
        f"Teklif '{quotation.quotation_number}' onay durumu "
        f"'{APPROVAL_LABELS[old_approval]}' -> '{APPROVAL_LABELS[new_approval]}'",
    )
    commit_or_rollback(db, f"Teklif {quotation.quotation_number} onay degisikligi")
    db.refresh(quotation)
    return quotation
