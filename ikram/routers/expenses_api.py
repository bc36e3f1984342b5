import uuid
from datetime import date

from fastapi import APIRouter, Query, status

from ikram.dependencies import CurrentUser, DbSession
from ikram.schemas.expense import (
    ExpenseCreate,
    ExpenseListResponse,
    ExpenseResponse,
    ExpenseSummary,
    ExpenseUpdate,
)
from ikram.schemas.payment import PaymentQuotationSummary
from ikram.services import expense as expense_service

router = APIRouter()


@router.get("", response_model=ExpenseListResponse)
def list_expenses(
    db: DbSession,
    current_user: CurrentUser,
    page: int = Query(default=1, ge=1),
    size: int = Query(default=20, ge=1, le=100),
    quotation_id: uuid.UUID | None = Query(default=None),
    category: str | None = Query(default=None, description="internal/external/miscellaneous"),
    start_date: date | None = Query(default=None),
    end_date: date | None = Query(default=None),
    sort_by: str = Query(default="expense_date"),
    sort_order: str = Query(default="desc"),
):
    expenses, total = expense_service.get_expenses(
        db=db,
        owner_id=current_user.id,
        page=page,
        size=size,
        quotation_id=quotation_id,
        category=category,
        start_date=start_date,
        end_date=end_date,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return ExpenseListResponse(items=expenses, total=total, page=page, size=size)


@router.get("/summary", response_model=ExpenseSummary)
def expense_summary(
    db: DbSession,
    current_user: CurrentUser,
    quotation_id: uuid.UUID | None = Query(default=None),
):
    """Kategori bazli toplamlar (istege bagli tek teklif icin)."""
    return expense_service.get_expense_summary(db, current_user.id, quotation_id=quotation_id)


@router.get("/quotations", response_model=list[PaymentQuotationSummary])
def expense_quotations(db: DbSession, current_user: CurrentUser):
    """Gider girilebilecek (onaylanmis) teklifler."""
    return expense_service.get_expense_quotations(db, current_user.id)


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
def create_expense(data: ExpenseCreate, db: DbSession, current_user: CurrentUser):
    return expense_service.create_expense(db, current_user.id, data)


@router.get("/{expense_id}", response_model=ExpenseResponse)
def get_expense(expense_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    return expense_service.get_expense(db, expense_id, current_user.id)


@router.put("/{expense_id}", response_model=ExpenseResponse)
def update_expense(
    expense_id: uuid.UUID, data: ExpenseUpdate, db: DbSession, current_user: CurrentUser
):
    return expense_service.update_expense(db, expense_id, current_user.id, data)


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_expense(expense_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    expense_service.delete_expense(db, expense_id, current_user.id)
