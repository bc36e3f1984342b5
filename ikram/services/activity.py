import uuid

from sqlalchemy.orm import Session

from ikram.models.activity import Activity


def log_activity(
    db: Session,
    owner_id: uuid.UUID,
    action: str,
    entity_type: str,
    entity_id: uuid.UUID | None,
    description: str,
) -> Activity:
    """
    Islem gecmisine kayit ekle.
    Sadece session'a ekler; flush ve commit cagiran servisin isidir, boylece
    kayit ana islemle ayni transaction icinde kalir.

    Args:
        action: create, update, delete, status_change, approval_change, client_response
        entity_type: client, quotation, event, event_expense, payment, expense, package ...
        description: Insan tarafindan okunabilir aciklama
    """
    activity = Activity(
        owner_id=owner_id,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        description=description,
    )
    db.add(activity)
    return activity


def get_activities(
    db: Session, owner_id: uuid.UUID, page: int = 1, size: int = 20,
    entity_type: str | None = None, entity_id: uuid.UUID | None = None,
) -> tuple[list[Activity], int]:
    """
    Islem gecmisini yeniden eskiye listele.
    entity_id verilirse tek bir kaydin (ornegin bir teklifin) gecmisi doner.
    """
    query = db.query(Activity).filter(Activity.owner_id == owner_id)

    if entity_type:
        query = query.filter(Activity.entity_type == entity_type)
    if entity_id:
        query = query.filter(Activity.entity_id == entity_id)

    total = query.count()
    activities = (
        query.order_by(Activity.created_at.desc())
        .offset((page - 1) * size)
        .limit(size)
        .all()
    )
    return activities, total
