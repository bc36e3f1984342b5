"""
Takvim ve etkinlik giderleri API'si.

Endpoint'ler:
    GET    /calendar?year=&month=                -> Ay gorunumu
    GET    /                                     -> Etkinlik listesi
    GET    /{event_id}                           -> Etkinlik detay
    PUT    /{event_id}                           -> Etkinlik guncelle (durum, not ...)
    DELETE /{event_id}                           -> Etkinlik sil
    GET    /{event_id}/expenses                  -> Gider kaydi ve kalemleri
    PATCH  /{event_id}/expenses                  -> Gider durumu / notu
    POST   /{event_id}/expenses/items            -> Gider kalemi ekle
    PUT    /{event_id}/expenses/items/{item_id}  -> Gider kalemi guncelle
    DELETE /{event_id}/expenses/items/{item_id}  -> Gider kalemi sil
"""
import uuid
from datetime import date

from fastapi import APIRouter, Query, status

from ikram.dependencies import CurrentUser, DbSession
from ikram.schemas.event import (
    CalendarEntry,
    CalendarEventResponse,
    CalendarEventUpdate,
    EventExpenseItemCreate,
    EventExpenseItemUpdate,
    EventExpenseResponse,
    EventExpenseUpdate,
)
from ikram.services import calendar_service
from ikram.services import event_expense as event_expense_service

router = APIRouter()


@router.get("/calendar", response_model=list[CalendarEntry])
def month_view(
    db: DbSession,
    current_user: CurrentUser,
    year: int = Query(ge=2000, le=2100),
    month: int = Query(ge=1, le=12),
):
    """Aydaki etkinlikler ve onaylanmis tekliflerin servis tarihleri."""
    return calendar_service.get_month_entries(db, current_user.id, year, month)


@router.get("", response_model=list[CalendarEventResponse])
def list_events(
    db: DbSession,
    current_user: CurrentUser,
    start: date | None = Query(default=None, description="Baslangic tarihi"),
    end: date | None = Query(default=None, description="Bitis tarihi"),
    event_status: str | None = Query(default=None, alias="status"),
):
    return calendar_service.get_events(db, current_user.id, start=start, end=end, event_status=event_status)


@router.get("/{event_id}", response_model=CalendarEventResponse)
def get_event(event_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    return calendar_service.get_event(db, event_id, current_user.id)


@router.put("/{event_id}", response_model=CalendarEventResponse)
def update_event(
    event_id: uuid.UUID, data: CalendarEventUpdate, db: DbSession, current_user: CurrentUser
):
    return calendar_service.update_event(db, event_id, current_user.id, data)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(event_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    calendar_service.delete_event(db, event_id, current_user.id)


# --- Etkinlik giderleri ---

@router.get("/{event_id}/expenses", response_model=EventExpenseResponse)
def get_event_expenses(event_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    return event_expense_service.get_event_expense(db, event_id, current_user.id)


@router.patch("/{event_id}/expenses", response_model=EventExpenseResponse)
def update_event_expenses(
    event_id: uuid.UUID, data: EventExpenseUpdate, db: DbSession, current_user: CurrentUser
):
    return event_expense_service.update_event_expense(db, event_id, current_user.id, data)


@router.post(
    "/{event_id}/expenses/items",
    response_model=EventExpenseResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_expense_item(
    event_id: uuid.UUID, data: EventExpenseItemCreate, db: DbSession, current_user: CurrentUser
):
    """Gider kalemi ekle; toplam gider ve kar yeniden hesaplanir."""
    return event_expense_service.add_expense_item(db, event_id, current_user.id, data)


@router.put("/{event_id}/expenses/items/{item_id}", response_model=EventExpenseResponse)
def update_expense_item(
    event_id: uuid.UUID,
    item_id: uuid.UUID,
    data: EventExpenseItemUpdate,
    db: DbSession,
    current_user: CurrentUser,
):
    return event_expense_service.update_expense_item(db, event_id, item_id, current_user.id, data)


@router.delete("/{event_id}/expenses/items/{item_id}", response_model=EventExpenseResponse)
def delete_expense_item(
    event_id: uuid.UUID, item_id: uuid.UUID, db: DbSession, current_user: CurrentUser
):
    return event_expense_service.delete_expense_item(db, event_id, item_id, current_user.id)
