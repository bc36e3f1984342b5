"""
Takvim servisi.
Kabul edilmis tekliflerden olusan etkinlikler ve onaylanmis tekliflerin
servis tarihleri ay gorunumu icin tek listede birlestirilir.
"""
import uuid
import calendar
from datetime import date

from sqlalchemy import func
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ikram.models.event import CalendarEvent
from ikram.models.quotation import Quotation
from ikram.schemas.event import CalendarEventUpdate
from ikram.services.activity import log_activity

# Renk tanimlari
COLORS = {
    "Confirmed": "#22c55e",      # yesil
    "In Progress": "#3b82f6",    # mavi
    "Completed": "#6b7280",      # gri
    "Cancelled": "#ef4444",      # kirmizi
    "approved_quotation": "#a855f7",  # mor
}


def get_month_entries(
    db: Session, owner_id: uuid.UUID, year: int, month: int
) -> list[dict]:
    """
    Belirli bir aydaki takvim kayitlarini getir.

    Kayit tipleri:
        - event: Kabul edilmis tekliften olusan etkinlik (renk duruma gore)
        - approved_quotation: Onaylanmis teklifin servis tarihi
          (servis tarihi yoksa etkinlik tarihi)

    Her kayit formati:
        {
            "date": date(2026, 2, 15),
            "type": "event",
            "title": "Wedding - Rahul Sharma",
            "status": "Confirmed",
            "color": "#22c55e",
            "url": "/events/uuid"
        }
    """
    if not 1 <= month <= 12:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Ay 1 ile 12 arasinda olmali"
        )

    first_day = date(year, month, 1)
    last_day = date(year, month, calendar.monthrange(year, month)[1])
    entries = []

    # --- 1. Etkinlikler ---
    events = (
        db.query(CalendarEvent)
        .filter(
            CalendarEvent.owner_id == owner_id,
            CalendarEvent.event_date >= first_day,
            CalendarEvent.event_date <= last_day,
        )
        .all()
    )
    for event in events:
        entries.append({
            "date": event.event_date,
            "type": "event",
            "title": event.event_name,
            "status": event.status,
            "color": COLORS.get(event.status, COLORS["Confirmed"]),
            "url": f"/events/{event.id}",
        })

    # --- 2. Onaylanmis tekliflerin servis tarihleri ---
    service_day = func.coalesce(Quotation.service_date, Quotation.event_date)
    approved = (
        db.query(Quotation)
        .filter(
            Quotation.owner_id == owner_id,
            Quotation.approval_status == "approved",
            service_day >= first_day,
            service_day <= last_day,
        )
        .all()
    )
    for quotation in approved:
        entries.append({
            "date": quotation.service_date or quotation.event_date,
            "type": "approved_quotation",
            "title": f"{quotation.quotation_number} - {quotation.client_name}",
            "status": quotation.status,
            "color": COLORS["approved_quotation"],
            "url": f"/quotations/{quotation.id}",
        })

    entries.sort(key=lambda e: (e["date"], e["title"]))
    return entries


def get_events(
    db: Session, owner_id: uuid.UUID,
    start: date | None = None, end: date | None = None,
    event_status: str | None = None,
) -> list[CalendarEvent]:
    """Etkinlik listesi, tarihe gore artan."""
    query = db.query(CalendarEvent).filter(CalendarEvent.owner_id == owner_id)
    if start:
        query = query.filter(CalendarEvent.event_date >= start)
    if end:
        query = query.filter(CalendarEvent.event_date <= end)
    if event_status:
        query = query.filter(CalendarEvent.status == event_status)
    return query.order_by(CalendarEvent.event_date.asc()).all()


def get_event(db: Session, event_id: uuid.UUID, owner_id: uuid.UUID) -> CalendarEvent:
    event = db.query(CalendarEvent).filter(
        CalendarEvent.id == event_id, CalendarEvent.owner_id == owner_id
    ).first()
    if not event:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Etkinlik bulunamadi")
    return event


def update_event(
    db: Session, event_id: uuid.UUID, owner_id: uuid.UUID, data: CalendarEventUpdate
) -> CalendarEvent:
    event = get_event(db, event_id, owner_id)
    update_data = data.model_dump(exclude_unset=True)
    old_status = event.status
    for field, value in update_data.items():
        setattr(event, field, value)

    if "status" in update_data and update_data["status"] != old_status:
        description = f"Etkinlik '{event.event_name}' durumu '{old_status}' -> '{event.status}'"
        action = "status_change"
    else:
        description = f"Etkinlik '{event.event_name}' guncellendi"
        action = "update"
    log_activity(db, owner_id, action, "event", event_id, description)
    db.commit()
    db.refresh(event)
    return event


def delete_event(db: Session, event_id: uuid.UUID, owner_id: uuid.UUID) -> None:
    """Etkinligi ve gider kaydini sil. Teklif etkilenmez."""
    event = get_event(db, event_id, owner_id)
    name = event.event_name
    db.delete(event)
    log_activity(db, owner_id, "delete", "event", event_id, f"Etkinlik '{name}' silindi")
    db.commit()
