"""
Odeme kayitlari.
Odemeler sadece kayit amaclidir: tekliflerin advance_paid alani ve odeme
durumu teklif formundan yonetilir, burada degistirilmez.
"""
import uuid
from datetime import date
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ikram.models.payment import Payment
from ikram.models.quotation import Quotation
from ikram.schemas.payment import PaymentCreate
from ikram.services.activity import log_activity
from ikram.services.pricing import format_currency
from ikram.config import settings

# Odeme alinabilecek teklif durumlari
PAYABLE_STATUSES = ("sent", "accepted")


def _get_quotation_for_owner(
    db: Session, quotation_id: uuid.UUID, owner_id: uuid.UUID
) -> Quotation:
    """Teklifin sahibi kontrolu ile teklif getir."""
    quotation = db.query(Quotation).filter(
        Quotation.id == quotation_id, Quotation.owner_id == owner_id
    ).first()
    if not quotation:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Teklif bulunamadi",
        )
    return quotation


def get_payments(
    db: Session, owner_id: uuid.UUID, quotation_id: uuid.UUID | None = None
) -> list[Payment]:
    """Odemeler, en yeni once. quotation_id verilirse sadece o teklifinkiler."""
    query = db.query(Payment).filter(Payment.owner_id == owner_id)
    if quotation_id:
        _get_quotation_for_owner(db, quotation_id, owner_id)
        query = query.filter(Payment.quotation_id == quotation_id)
    return query.order_by(Payment.created_at.desc()).all()


def get_payable_quotations(db: Session, owner_id: uuid.UUID) -> list[Quotation]:
    """Odeme kaydi girilebilecek teklifler (gonderilmis veya kabul edilmis)."""
    return (
        db.query(Quotation)
        .filter(
            Quotation.owner_id == owner_id,
            Quotation.status.in_(PAYABLE_STATUSES),
        )
        .order_by(Quotation.event_date.asc())
        .all()
    )


def create_payment(db: Session, owner_id: uuid.UUID, data: PaymentCreate) -> Payment:
    quotation = _get_quotation_for_owner(db, data.quotation_id, owner_id)

    payment = Payment(
        owner_id=owner_id,
        quotation_id=quotation.id,
        amount=data.amount,
        payment_type=data.payment_type,
        payment_method=data.payment_method,
        payment_status=data.payment_status,
        transaction_reference=data.transaction_reference,
        payment_date=data.payment_date or date.today(),
        notes=data.notes,
    )
    db.add(payment)
    db.flush()
    log_activity(
        db, owner_id, "create", "payment", payment.id,
        f"Teklif '{quotation.quotation_number}' icin {settings.CURRENCY_LABEL} "
        f"{format_currency(data.amount)} odeme kaydedildi ({data.payment_method})",
    )
    db.commit()
    db.refresh(payment)
    return payment


def delete_payment(db: Session, payment_id: uuid.UUID, owner_id: uuid.UUID) -> None:
    payment = db.query(Payment).filter(
        Payment.id == payment_id, Payment.owner_id == owner_id
    ).first()
    if not payment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Odeme bulunamadi",
        )
    amount = payment.amount
    db.delete(payment)
    log_activity(
        db, owner_id, "delete", "payment", payment_id,
        f"{settings.CURRENCY_LABEL} {format_currency(amount)} tutarli odeme silindi",
    )
    db.commit()


def get_total_received(
    db: Session, owner_id: uuid.UUID, quotation_id: uuid.UUID | None = None
) -> Decimal:
    """Tamamlanmis odemelerin toplami."""
    query = db.query(func.coalesce(func.sum(Payment.amount), 0)).filter(
        Payment.owner_id == owner_id,
        Payment.payment_status == "completed",
    )
    if quotation_id:
        query = query.filter(Payment.quotation_id == quotation_id)
    return Decimal(str(query.scalar()))
