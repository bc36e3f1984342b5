"""
Ozet istatistikler (dashboard).
Musteri ve teklif sayilari, ciro, kabul orani ve ortalama siparis tutari.
"""
import uuid
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy import func
from sqlalchemy.orm import Session

from ikram.models.client import Client
from ikram.models.event import CalendarEvent, EventExpense
from ikram.models.expense import Expense
from ikram.models.quotation import Quotation
from ikram.services import payment as payment_service

CENT = Decimal("0.01")


def _money(value) -> Decimal:
    return Decimal(str(value or 0)).quantize(CENT, rounding=ROUND_HALF_UP)


def get_dashboard_stats(db: Session, owner_id: uuid.UUID) -> dict:
    """
    Dondurur: {
        "total_clients": int,
        "total_quotations": int,
        "total_revenue": Decimal,         # tum tekliflerin genel toplami
        "accepted_revenue": Decimal,      # kabul edilenlerin genel toplami
        "conversion_rate": Decimal,       # kabul / toplam * 100
        "average_order_value": Decimal,   # kabul edilen basina ortalama
        "status_counts": {"draft": int, ...},
        "approval_counts": {"pending": int, ...},
        "total_received": Decimal,
        "total_order_expenses": Decimal,
        "total_event_expenses": Decimal,
        "upcoming_events": int,
    }
    """
    total_clients = db.query(Client).filter(Client.owner_id == owner_id).count()

    base_query = db.query(Quotation).filter(Quotation.owner_id == owner_id)
    total_quotations = base_query.count()

    status_counts = {s: 0 for s in ("draft", "sent", "accepted", "rejected")}
    for quotation_status, count in (
        base_query.with_entities(Quotation.status, func.count(Quotation.id))
        .group_by(Quotation.status)
        .all()
    ):
        status_counts[quotation_status] = count

    approval_counts = {s: 0 for s in ("draft", "pending", "approved", "revised")}
    for approval_status, count in (
        base_query.with_entities(Quotation.approval_status, func.count(Quotation.id))
        .group_by(Quotation.approval_status)
        .all()
    ):
        approval_counts[approval_status] = count

    total_revenue = _money(
        base_query.with_entities(func.coalesce(func.sum(Quotation.grand_total), 0)).scalar()
    )
    accepted_revenue = _money(
        base_query.filter(Quotation.status == "accepted")
        .with_entities(func.coalesce(func.sum(Quotation.grand_total), 0))
        .scalar()
    )

    accepted_count = status_counts["accepted"]
    if total_quotations:
        conversion_rate = _money(Decimal(accepted_count) / Decimal(total_quotations) * 100)
    else:
        conversion_rate = _money(0)
    if accepted_count:
        average_order_value = _money(accepted_revenue / accepted_count)
    else:
        average_order_value = _money(0)

    total_order_expenses = _money(
        db.query(func.coalesce(func.sum(Expense.amount), 0))
        .filter(Expense.owner_id == owner_id)
        .scalar()
    )
    total_event_expenses = _money(
        db.query(func.coalesce(func.sum(EventExpense.total_expenses), 0))
        .filter(EventExpense.owner_id == owner_id)
        .scalar()
    )
    upcoming_events = (
        db.query(CalendarEvent)
        .filter(
            CalendarEvent.owner_id == owner_id,
            CalendarEvent.event_date >= date.today(),
            CalendarEvent.status != "Cancelled",
        )
        .count()
    )

    return {
        "total_clients": total_clients,
        "total_quotations": total_quotations,
        "total_revenue": total_revenue,
        "accepted_revenue": accepted_revenue,
        "conversion_rate": conversion_rate,
        "average_order_value": average_order_value,
        "status_counts": status_counts,
        "approval_counts": approval_counts,
        "total_received": _money(payment_service.get_total_received(db, owner_id)),
        "total_order_expenses": total_order_expenses,
        "total_event_expenses": total_event_expenses,
        "upcoming_events": upcoming_events,
    }
