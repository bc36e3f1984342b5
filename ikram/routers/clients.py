import uuid

from fastapi import APIRouter, Query, status

from ikram.dependencies import CurrentUser, DbSession
from ikram.schemas.client import (
    ClientCreate,
    ClientUpdate,
    ClientResponse,
    ClientListResponse,
)
from ikram.schemas.quotation import QuotationListItem
from ikram.services import client as client_service

router = APIRouter()


@router.get("", response_model=ClientListResponse)
def list_clients(
    db: DbSession,
    current_user: CurrentUser,
    page: int = Query(default=1, ge=1, description="Sayfa numarasi"),
    size: int = Query(default=20, ge=1, le=100, description="Sayfa basi kayit"),
    search: str | None = Query(default=None, description="Arama (ad, telefon, email, firma)"),
    sort_by: str = Query(default="created_at", description="Siralama alani (created_at/name/company_name)"),
    sort_order: str = Query(default="desc", description="Siralama yonu (asc/desc)"),
):
    clients, total = client_service.get_clients(
        db=db,
        owner_id=current_user.id,
        page=page,
        size=size,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return ClientListResponse(items=clients, total=total, page=page, size=size)


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
def create_client(data: ClientCreate, db: DbSession, current_user: CurrentUser):
    return client_service.create_client(db=db, owner_id=current_user.id, data=data)


@router.get("/{client_id}", response_model=ClientResponse)
def get_client(client_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    return client_service.get_client(db=db, client_id=client_id, owner_id=current_user.id)


@router.get("/{client_id}/quotations", response_model=list[QuotationListItem])
def client_quotations(client_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    """Musteriye bagli teklifler."""
    return client_service.get_client_quotations(db, client_id, current_user.id)


@router.put("/{client_id}", response_model=ClientResponse)
def update_client(
    client_id: uuid.UUID, data: ClientUpdate, db: DbSession, current_user: CurrentUser
):
    """Musteriyi guncelle. Sadece gonderilen alanlar degisir."""
    return client_service.update_client(
        db=db, client_id=client_id, owner_id=current_user.id, data=data
    )


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(client_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    client_service.delete_client(db=db, client_id=client_id, owner_id=current_user.id)
