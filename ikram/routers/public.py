"""
Herkese acik teklif router'i.
Giris gerektirmez; musteri kendisine gonderilen link ile teklifi gorur ve
kabul/red cevabi verir. Cevap endpoint'i IP bazli sinirlandirilmistir.
"""
import uuid

from fastapi import APIRouter, Request

from ikram.config import settings
from ikram.dependencies import DbSession
from ikram.rate_limit import limiter
from ikram.schemas.public import ClientResponseCreate, PublicQuotationView
from ikram.services import public as public_service

router = APIRouter()


@router.get("/quotations/{quotation_id}", response_model=PublicQuotationView)
def view_quotation(quotation_id: uuid.UUID, db: DbSession):
    return public_service.get_public_quotation(db, quotation_id)


@router.post("/quotations/{quotation_id}/respond", response_model=PublicQuotationView)
@limiter.limit(settings.RESPONSE_RATE_LIMIT)
def respond_to_quotation(
    request: Request,
    quotation_id: uuid.UUID,
    data: ClientResponseCreate,
    db: DbSession,
):
    """
    Teklifi kabul et veya reddet.
    Ornek: {"response_type": "accepted", "response_message": "Tarih uygun"}
    """
    return public_service.submit_response(db, quotation_id, data)
