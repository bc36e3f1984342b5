"""
Musteri cevap akisi.
Teklif linkine sahip herkes (giris yapmadan) teklifi gorebilir ve bir kez
kabul/red cevabi verebilir. Teklif ID'si erisim anahtari gorevi gorur.
"""
import uuid
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ikram.models.quotation import Quotation, QuotationResponse
from ikram.schemas.public import ClientResponseCreate, PublicQuotationItem, PublicQuotationView
from ikram.schemas.quotation import ClientResponseRecord, QuotationTotalsResponse
from ikram.services.activity import log_activity
from ikram.services.lifecycle import CLOSED_STATUSES, STATUS_LABELS, apply_status, commit_or_rollback
from ikram.services.pricing import totals_for_quotation
from ikram.services.quotation import valid_until

logger = logging.getLogger(__name__)


def get_shared_quotation(db: Session, quotation_id: uuid.UUID) -> Quotation:
    """
    Musteriyle paylasilmis teklifi getir.
    Taslak teklifler henuz paylasilmadigi icin bulunamadi sayilir.
    """
    quotation = db.query(Quotation).filter(Quotation.id == quotation_id).first()
    if not quotation or quotation.status == "draft":
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Teklif bulunamadi"
        )
    return quotation


def build_public_view(quotation: Quotation) -> PublicQuotationView:
    """Dahili alanlar olmadan musteri gorunumu; tutarlar yeniden hesaplanir."""
    totals = totals_for_quotation(quotation)
    latest = quotation.latest_response
    return PublicQuotationView(
        id=quotation.id,
        quotation_number=quotation.quotation_number,
        client_name=quotation.client_name,
        event_date=quotation.event_date,
        service_date=quotation.service_date,
        event_type=quotation.event_type,
        event_venue=quotation.event_venue,
        number_of_guests=quotation.number_of_guests,
        discount_percentage=quotation.discount_percentage,
        tax_percentage=quotation.tax_percentage,
        service_charges=quotation.service_charges,
        external_charges=quotation.external_charges,
        status=quotation.status,
        valid_until=valid_until(quotation),
        remarks=quotation.remarks,
        terms_and_conditions=quotation.terms_and_conditions,
        items=[PublicQuotationItem.model_validate(item) for item in quotation.items],
        totals=QuotationTotalsResponse(**totals.as_dict()),
        latest_response=ClientResponseRecord.model_validate(latest) if latest else None,
        can_respond=quotation.status not in CLOSED_STATUSES,
    )


def get_public_quotation(db: Session, quotation_id: uuid.UUID) -> PublicQuotationView:
    return build_public_view(get_shared_quotation(db, quotation_id))


def submit_response(
    db: Session, quotation_id: uuid.UUID, data: ClientResponseCreate
) -> PublicQuotationView:
    """
    Musteri cevabini kaydet.
    Cevap kaydi, durum degisikligi ve (kabulde) etkinlik + gider kaydi tek
    commit ile yazilir. Kabul/red edilmis teklife yeni cevap verilemez (409).
    """
    quotation = get_shared_quotation(db, quotation_id)

    if quotation.status in CLOSED_STATUSES:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Bu teklif zaten cevaplanmis ({STATUS_LABELS[quotation.status]})",
        )

    try:
        quotation.responses.append(
            QuotationResponse(
                response_type=data.response_type,
                response_message=data.response_message,
            )
        )
        apply_status(db, quotation, data.response_type)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Teklif %s icin musteri cevabi islenemedi", quotation.quotation_number)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Islem kaydedilemedi, degisiklikler geri alindi",
        )

    log_activity(
        db, quotation.owner_id, "client_response", "quotation", quotation.id,
        f"Musteri '{quotation.client_name}' teklif '{quotation.quotation_number}' "
        f"icin cevap verdi: {STATUS_LABELS[data.response_type]}",
    )
    commit_or_rollback(db, f"Teklif {quotation.quotation_number} musteri cevabi")
    db.refresh(quotation)
    logger.info(
        "Musteri cevabi alindi: %s -> %s", quotation.quotation_number, data.response_type
    )
    return build_public_view(quotation)
