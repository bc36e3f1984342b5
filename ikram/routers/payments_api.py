import uuid

from fastapi import APIRouter, Query, status

from ikram.dependencies import CurrentUser, DbSession
from ikram.schemas.payment import PaymentCreate, PaymentQuotationSummary, PaymentResponse
from ikram.services import payment as payment_service

router = APIRouter()


@router.get("", response_model=list[PaymentResponse])
def list_payments(
    db: DbSession,
    current_user: CurrentUser,
    quotation_id: uuid.UUID | None = Query(default=None, description="Teklife gore filtrele"),
):
    return payment_service.get_payments(db, current_user.id, quotation_id=quotation_id)


@router.get("/quotations", response_model=list[PaymentQuotationSummary])
def payable_quotations(db: DbSession, current_user: CurrentUser):
    """Odeme girilebilecek teklifler (gonderilmis / kabul edilmis)."""
    return payment_service.get_payable_quotations(db, current_user.id)


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
def create_payment(data: PaymentCreate, db: DbSession, current_user: CurrentUser):
    """
    Odeme kaydi ekle.
    Teklifin advance_paid alani degismez; kayit sadece takip icindir.
    """
    return payment_service.create_payment(db, current_user.id, data)


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_payment(payment_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    payment_service.delete_payment(db, payment_id, current_user.id)
