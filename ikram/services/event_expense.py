"""
Etkinlik gider servisi.
Her etkinligin tek bir gider kaydi vardir; kalem eklendikce, guncellendikce
veya silindikce toplam gider, kar ve kar yuzdesi yeniden hesaplanir.

    profit            = total_revenue - total_expenses
    profit_percentage = profit / total_revenue * 100   (gelir 0 ise 0)
"""
import uuid
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ikram.models.event import CalendarEvent, EventExpense, EventExpenseItem
from ikram.schemas.event import (
    EventExpenseItemCreate, EventExpenseItemUpdate, EventExpenseUpdate,
)
from ikram.services.activity import log_activity

CENT = Decimal("0.01")


def compute_profit(revenue, total_expenses) -> tuple[Decimal, Decimal]:
    """(kar, kar yuzdesi) dondur."""
    revenue = Decimal(revenue or 0)
    profit = (revenue - Decimal(total_expenses or 0)).quantize(CENT, rounding=ROUND_HALF_UP)
    if revenue == 0:
        return profit, Decimal("0.00")
    percentage = (profit / revenue * Decimal(100)).quantize(CENT, rounding=ROUND_HALF_UP)
    return profit, percentage


def _recalculate(expense: EventExpense) -> None:
    total = sum((Decimal(item.amount) for item in expense.items), Decimal("0"))
    expense.total_expenses = total.quantize(CENT, rounding=ROUND_HALF_UP)
    expense.profit, expense.profit_percentage = compute_profit(
        expense.event.total_revenue, expense.total_expenses
    )


def get_event_expense(
    db: Session, event_id: uuid.UUID, owner_id: uuid.UUID
) -> EventExpense:
    """
    Etkinligin gider kaydi. Teklifsiz (elle eklenmis) etkinliklerde
    kayit yoksa bos bir kayit olusturulur.
    """
    event = db.query(CalendarEvent).filter(
        CalendarEvent.id == event_id, CalendarEvent.owner_id == owner_id
    ).first()
    if not event:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Etkinlik bulunamadi")

    if event.expense is None:
        event.expense = EventExpense(
            owner_id=owner_id,
            quotation_id=event.quotation_id,
            total_expenses=Decimal("0.00"),
        )
        _recalculate(event.expense)
        db.commit()
        db.refresh(event)
    return event.expense


def update_event_expense(
    db: Session, event_id: uuid.UUID, owner_id: uuid.UUID, data: EventExpenseUpdate
) -> EventExpense:
    expense = get_event_expense(db, event_id, owner_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(expense, field, value)
    db.commit()
    db.refresh(expense)
    return expense


def _get_item(expense: EventExpense, item_id: uuid.UUID) -> EventExpenseItem:
    for item in expense.items:
        if item.id == item_id:
            return item
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gider kalemi bulunamadi")


def add_expense_item(
    db: Session, event_id: uuid.UUID, owner_id: uuid.UUID, data: EventExpenseItemCreate
) -> EventExpense:
    expense = get_event_expense(db, event_id, owner_id)
    item = EventExpenseItem(**data.model_dump())
    expense.items.append(item)
    _recalculate(expense)
    db.flush()
    log_activity(
        db, owner_id, "create", "event_expense", expense.id,
        f"'{expense.event.event_name}' icin gider eklendi: {item.vendor_name} {item.amount}",
    )
    db.commit()
    db.refresh(expense)
    return expense


def update_expense_item(
    db: Session, event_id: uuid.UUID, item_id: uuid.UUID, owner_id: uuid.UUID,
    data: EventExpenseItemUpdate,
) -> EventExpense:
    expense = get_event_expense(db, event_id, owner_id)
    item = _get_item(expense, item_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(item, field, value)
    _recalculate(expense)
    log_activity(
        db, owner_id, "update", "event_expense", expense.id,
        f"'{expense.event.event_name}' gider kalemi guncellendi: {item.vendor_name}",
    )
    db.commit()
    db.refresh(expense)
    return expense


def delete_expense_item(
    db: Session, event_id: uuid.UUID, item_id: uuid.UUID, owner_id: uuid.UUID
) -> EventExpense:
    expense = get_event_expense(db, event_id, owner_id)
    item = _get_item(expense, item_id)
    vendor_name = item.vendor_name
    expense.items.remove(item)
    _recalculate(expense)
    log_activity(
        db, owner_id, "delete", "event_expense", expense.id,
        f"'{expense.event.event_name}' gider kalemi silindi: {vendor_name}",
    )
    db.commit()
    db.refresh(expense)
    return expense

