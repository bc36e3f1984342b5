"""
Siparis (teklif) giderleri.
Onaylanmis teklifler icin ic, dis ve diger giderler kaydedilir.
"""
import uuid
from datetime import date
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ikram.config import settings
from ikram.models.expense import Expense
from ikram.models.quotation import Quotation
from ikram.schemas.expense import ExpenseCreate, ExpenseUpdate
from ikram.services.activity import log_activity
from ikram.services.pricing import format_currency

CATEGORIES = ("internal", "external", "miscellaneous")


def _get_quotation_for_owner(
    db: Session, quotation_id: uuid.UUID, owner_id: uuid.UUID
) -> Quotation:
    quotation = db.query(Quotation).filter(
        Quotation.id == quotation_id, Quotation.owner_id == owner_id
    ).first()
    if not quotation:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Teklif bulunamadi"
        )
    return quotation


def get_expense_quotations(db: Session, owner_id: uuid.UUID) -> list[Quotation]:
    """Gider girilebilecek teklifler: onaylanmis olanlar."""
    return (
        db.query(Quotation)
        .filter(
            Quotation.owner_id == owner_id,
            Quotation.approval_status == "approved",
        )
        .order_by(Quotation.event_date.asc())
        .all()
    )


def get_expenses(
    db: Session,
    owner_id: uuid.UUID,
    page: int = 1,
    size: int = 20,
    quotation_id: uuid.UUID | None = None,
    category: str | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    sort_by: str = "expense_date",
    sort_order: str = "desc",
) -> tuple[list[Expense], int]:
    """
    Gider kayitlarini listele.
    Teklif, kategori ve tarih araligi filtresi, siralama ve sayfalama destekler.
    Dondurur: (kayit_listesi, toplam_sayi)
    """
    query = db.query(Expense).filter(Expense.owner_id == owner_id)

    if quotation_id:
        query = query.filter(Expense.quotation_id == quotation_id)
    if category:
        query = query.filter(Expense.category == category)
    if start_date:
        query = query.filter(Expense.expense_date >= start_date)
    if end_date:
        query = query.filter(Expense.expense_date <= end_date)

    total = query.count()

    allowed_sort_fields = {
        "expense_date": Expense.expense_date,
        "amount": Expense.amount,
        "created_at": Expense.created_at,
        "description": Expense.description,
    }
    sort_column = allowed_sort_fields.get(sort_by, Expense.expense_date)
    if sort_order == "asc":
        query = query.order_by(sort_column.asc())
    else:
        query = query.order_by(sort_column.desc())

    expenses = query.offset((page - 1) * size).limit(size).all()
    return expenses, total


def get_expense(db: Session, expense_id: uuid.UUID, owner_id: uuid.UUID) -> Expense:
    expense = db.query(Expense).filter(
        Expense.id == expense_id,
        Expense.owner_id == owner_id,
    ).first()
    if not expense:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Gider kaydi bulunamadi",
        )
    return expense


def create_expense(db: Session, owner_id: uuid.UUID, data: ExpenseCreate) -> Expense:
    """Sadece onaylanmis teklife gider girilebilir (aksi halde 400)."""
    quotation = _get_quotation_for_owner(db, data.quotation_id, owner_id)
    if quotation.approval_status != "approved":
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Teklif '{quotation.quotation_number}' onaylanmadan gider girilemez",
        )
    values = data.model_dump()
    values["expense_date"] = data.expense_date or date.today()
    expense = Expense(owner_id=owner_id, **values)
    db.add(expense)
    db.flush()
    log_activity(
        db, owner_id, "create", "expense", expense.id,
        f"Teklif '{quotation.quotation_number}' icin gider '{data.description}' "
        f"({settings.CURRENCY_LABEL} {format_currency(data.amount)}) eklendi",
    )
    db.commit()
    db.refresh(expense)
    return expense


def update_expense(
    db: Session, expense_id: uuid.UUID, owner_id: uuid.UUID, data: ExpenseUpdate
) -> Expense:
    """Sadece gonderilen alanlari gunceller."""
    expense = get_expense(db, expense_id, owner_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(expense, field, value)
    log_activity(
        db, owner_id, "update", "expense", expense_id,
        f"Gider '{expense.description}' guncellendi",
    )
    db.commit()
    db.refresh(expense)
    return expense


def delete_expense(db: Session, expense_id: uuid.UUID, owner_id: uuid.UUID) -> None:
    expense = get_expense(db, expense_id, owner_id)
    description = expense.description
    db.delete(expense)
    log_activity(
        db, owner_id, "delete", "expense", expense_id,
        f"Gider '{description}' silindi",
    )
    db.commit()


def get_expense_summary(
    db: Session, owner_id: uuid.UUID, quotation_id: uuid.UUID | None = None
) -> dict:
    """
    Kategori bazli gider toplamlari.
    Dondurur: {"total": Decimal, "internal": Decimal, "external": Decimal, "miscellaneous": Decimal}
    """
    query = db.query(
        Expense.category, func.coalesce(func.sum(Expense.amount), 0)
    ).filter(Expense.owner_id == owner_id)
    if quotation_id:
        query = query.filter(Expense.quotation_id == quotation_id)
    rows = query.group_by(Expense.category).all()

    summary = {category: Decimal("0") for category in CATEGORIES}
    for category, amount in rows:
        summary[category] = summary.get(category, Decimal("0")) + Decimal(str(amount))
    summary["total"] = sum((summary[c] for c in CATEGORIES), Decimal("0"))
    return summary
