import uuid

from sqlalchemy import or_
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ikram.models.client import Client
from ikram.models.quotation import Quotation
from ikram.schemas.client import ClientCreate, ClientUpdate
from ikram.services.activity import log_activity


def get_clients(
    db: Session,
    owner_id: uuid.UUID,
    page: int = 1,
    size: int = 20,
    search: str | None = None,
    sort_by: str = "created_at",
    sort_order: str = "desc",
) -> tuple[list[Client], int]:
    """
    Musterileri listele.
    Arama: ad, telefon, email veya firma adinda.
    Dondurur: (musteri_listesi, toplam_sayi)
    """
    query = db.query(Client).filter(Client.owner_id == owner_id)

    if search:
        search_filter = f"%{search}%"
        query = query.filter(
            or_(
                Client.name.ilike(search_filter),
                Client.phone.ilike(search_filter),
                Client.email.ilike(search_filter),
                Client.company_name.ilike(search_filter),
            )
        )

    total = query.count()

    allowed_sort_fields = {
        "created_at": Client.created_at,
        "name": Client.name,
        "company_name": Client.company_name,
    }
    sort_column = allowed_sort_fields.get(sort_by, Client.created_at)
    if sort_order == "asc":
        query = query.order_by(sort_column.asc())
    else:
        query = query.order_by(sort_column.desc())

    clients = query.offset((page - 1) * size).limit(size).all()
    return clients, total


def get_client(db: Session, client_id: uuid.UUID, owner_id: uuid.UUID) -> Client:
    """Tek bir musteriyi getir. Sahiplik kontrolu yapar."""
    client = db.query(Client).filter(
        Client.id == client_id,
        Client.owner_id == owner_id,
    ).first()
    if not client:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Musteri bulunamadi",
        )
    return client


def get_client_quotations(
    db: Session, client_id: uuid.UUID, owner_id: uuid.UUID
) -> list[Quotation]:
    """Musteriye bagli teklifler, en yeni once."""
    get_client(db, client_id, owner_id)
    return (
        db.query(Quotation)
        .filter(Quotation.client_id == client_id, Quotation.owner_id == owner_id)
        .order_by(Quotation.created_at.desc())
        .all()
    )


def create_client(db: Session, owner_id: uuid.UUID, data: ClientCreate) -> Client:
    client = Client(owner_id=owner_id, **data.model_dump())
    db.add(client)
    db.flush()
    log_activity(
        db, owner_id, "create", "client", client.id,
        f"Musteri '{client.name}' olusturuldu",
    )
    db.commit()
    db.refresh(client)
    return client


def update_client(
    db: Session, client_id: uuid.UUID, owner_id: uuid.UUID, data: ClientUpdate
) -> Client:
    """Sadece gonderilen alanlari gunceller (exclude_unset)."""
    client = get_client(db, client_id, owner_id)

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(client, field, value)

    log_activity(
        db, owner_id, "update", "client", client_id,
        f"Musteri '{client.name}' guncellendi",
    )
    db.commit()
    db.refresh(client)
    return client


def delete_client(db: Session, client_id: uuid.UUID, owner_id: uuid.UUID) -> None:
    """Musteriyi sil. Bagli tekliflerin client_id alani NULL olur, teklifler kalir."""
    client = get_client(db, client_id, owner_id)
    name = client.name
    db.query(Quotation).filter(Quotation.client_id == client_id).update(
        {Quotation.client_id: None}, synchronize_session=False
    )
    db.delete(client)
    log_activity(
        db, owner_id, "delete", "client", client_id,
        f"Musteri '{name}' silindi",
    )
    db.commit()
