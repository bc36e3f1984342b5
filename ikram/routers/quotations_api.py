"""
Teklif REST API Router'i.

Endpoint'ler:
    GET    /                      -> Teklif listesi (sayfalama + arama + durum/onay filtresi)
    GET    /next-number           -> Siradaki teklif numarasi
    POST   /preview               -> Kaydetmeden tutar hesaplama
    GET    /prefill               -> Paket veya menu sablonundan kalem uret
    POST   /                      -> Yeni teklif
    GET    /{quotation_id}        -> Teklif detay (kalemler + son musteri cevabi)
    PUT    /{quotation_id}        -> Tam guncelleme (kalemler yeniden yazilir)
    PATCH  /{quotation_id}/status   -> Durum degisikligi (kabulde etkinlik olusur)
    PATCH  /{quotation_id}/approval -> Onay durumu degisikligi
    DELETE /{quotation_id}        -> Teklif sil
    GET    /{quotation_id}/versions -> Duzenleme gecmisi
    POST   /{quotation_id}/share-link -> Musteri linki (taslak ise gonderildi yapilir)
    GET    /{quotation_id}/pdf    -> PDF indir
"""
import io
import uuid

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import StreamingResponse

from ikram.config import settings
from ikram.dependencies import CurrentUser, DbSession
from ikram.schemas.quotation import (
    PrefillItemsResponse,
    PricingInput,
    QuotationApprovalUpdate,
    QuotationCreate,
    QuotationListResponse,
    QuotationResponse,
    QuotationStatusUpdate,
    QuotationTotalsResponse,
    QuotationUpdate,
    QuotationVersionResponse,
)
from ikram.services import document as document_service
from ikram.services import lifecycle
from ikram.services import quotation as quotation_service

router = APIRouter()


@router.get("", response_model=QuotationListResponse)
def list_quotations(
    db: DbSession,
    current_user: CurrentUser,
    page: int = Query(default=1, ge=1, description="Sayfa numarasi"),
    size: int = Query(default=20, ge=1, le=100, description="Sayfa basi kayit sayisi"),
    search: str | None = Query(default=None, description="Teklif no, musteri adi veya telefon"),
    quotation_status: str | None = Query(
        default=None, alias="status", description="Durum filtresi (draft/sent/accepted/rejected)"
    ),
    approval_status: str | None = Query(
        default=None, description="Onay filtresi (draft/pending/approved/revised)"
    ),
    sort: str | None = Query(
        default=None, description="Siralama (date_asc, date_desc, total_asc, total_desc)"
    ),
):
    quotations, total = quotation_service.get_quotations(
        db=db,
        owner_id=current_user.id,
        page=page,
        size=size,
        search=search,
        status_filter=quotation_status,
        approval_filter=approval_status,
        sort=sort,
    )
    return QuotationListResponse(items=quotations, total=total, page=page, size=size)


@router.get("/next-number")
def next_quotation_number(db: DbSession, current_user: CurrentUser):
    return {"quotation_number": quotation_service.get_next_quotation_number(db)}


@router.post("/preview", response_model=QuotationTotalsResponse)
def preview_totals(data: PricingInput, db: DbSession, current_user: CurrentUser):
    """Formdaki degerlerle tutarlari hesapla, hicbir sey kaydetme."""
    totals = quotation_service.preview_totals(db, current_user.id, data)
    return QuotationTotalsResponse(**totals.as_dict())


@router.get("/prefill", response_model=PrefillItemsResponse)
def prefill_items(
    db: DbSession,
    current_user: CurrentUser,
    guests: int = Query(ge=0, description="Misafir sayisi"),
    package_id: uuid.UUID | None = Query(default=None),
    template_id: uuid.UUID | None = Query(default=None),
):
    """
    Paket veya menu sablonundan teklif kalemleri uret.
    Miktar = carpan x misafir sayisi. Tam olarak bir kaynak verilmelidir.
    """
    if (package_id is None) == (template_id is None):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="package_id veya template_id parametrelerinden biri verilmeli",
        )
    if package_id:
        items = quotation_service.prefill_from_package(db, package_id, current_user.id, guests)
        return PrefillItemsResponse(
            source="package", source_id=package_id, number_of_guests=guests, items=items
        )
    items = quotation_service.prefill_from_template(db, template_id, current_user.id, guests)
    return PrefillItemsResponse(
        source="template", source_id=template_id, number_of_guests=guests, items=items
    )


@router.post("", response_model=QuotationResponse, status_code=status.HTTP_201_CREATED)
def create_quotation(data: QuotationCreate, db: DbSession, current_user: CurrentUser):
    return quotation_service.create_quotation(db, current_user.id, data)


@router.get("/{quotation_id}", response_model=QuotationResponse)
def get_quotation(quotation_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    return quotation_service.get_quotation(db, quotation_id, current_user.id)


@router.put("/{quotation_id}", response_model=QuotationResponse)
def update_quotation(
    quotation_id: uuid.UUID, data: QuotationUpdate, db: DbSession, current_user: CurrentUser
):
    """
    Teklifi tam olarak guncelle. Kalemler gonderilen liste ile degistirilir.
    Fiyat veya kalem degisikliginde versiyon gecmisine kayit eklenir.
    """
    return quotation_service.update_quotation(db, quotation_id, current_user.id, data)


@router.patch("/{quotation_id}/status", response_model=QuotationResponse)
def update_quotation_status(
    quotation_id: uuid.UUID, data: QuotationStatusUpdate, db: DbSession, current_user: CurrentUser
):
    """
    Teklif durumunu gunceller.

    Gecerli durumlar: draft, sent, accepted, rejected
    'accepted' durumunda takvim etkinligi ve gider kaydi ayni islemde olusturulur.
    """
    return lifecycle.update_status(db, quotation_id, current_user.id, data.status)


@router.patch("/{quotation_id}/approval", response_model=QuotationResponse)
def update_quotation_approval(
    quotation_id: uuid.UUID, data: QuotationApprovalUpdate, db: DbSession, current_user: CurrentUser
):
    return lifecycle.update_approval(db, quotation_id, current_user.id, data.approval_status)


@router.delete("/{quotation_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_quotation(quotation_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    quotation_service.delete_quotation(db, quotation_id, current_user.id)


@router.get("/{quotation_id}/versions", response_model=list[QuotationVersionResponse])
def list_versions(quotation_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    return quotation_service.get_versions(db, quotation_id, current_user.id)


@router.post("/{quotation_id}/share-link")
def share_link(quotation_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    """Musterinin teklifi gorup cevap verebilecegi link. Taslak teklif gonderildi olarak isaretlenir."""
    quotation = lifecycle.share_quotation(db, quotation_id, current_user.id)
    base_url = settings.PUBLIC_BASE_URL.rstrip("/")
    return {"url": f"{base_url}/quotation/{quotation.id}", "status": quotation.status}


@router.get("/{quotation_id}/pdf")
def quotation_pdf(quotation_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    filename, content = document_service.quotation_pdf(db, quotation_id, current_user.id)
    return StreamingResponse(
        io.BytesIO(content),
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
