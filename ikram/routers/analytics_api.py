import uuid

from fastapi import APIRouter, Query

from ikram.dependencies import CurrentUser, DbSession
from ikram.schemas.analytics import ActivityListResponse, DashboardStats
from ikram.services import analytics as analytics_service
from ikram.services.activity import get_activities

router = APIRouter()


@router.get("/dashboard", response_model=DashboardStats)
def dashboard(db: DbSession, current_user: CurrentUser):
    """Teklif sayilari, ciro, kabul orani, ortalama siparis tutari."""
    return analytics_service.get_dashboard_stats(db, current_user.id)


@router.get("/activities", response_model=ActivityListResponse)
def activities(
    db: DbSession,
    current_user: CurrentUser,
    page: int = Query(default=1, ge=1),
    size: int = Query(default=20, ge=1, le=100),
    entity_type: str | None = Query(default=None, description="quotation, client, event ..."),
    entity_id: uuid.UUID | None = Query(default=None),
):
    """Islem gecmisi, yeniden eskiye."""
    items, total = get_activities(
        db, current_user.id, page=page, size=size,
        entity_type=entity_type, entity_id=entity_id,
    )
    return ActivityListResponse(items=items, total=total, page=page, size=size)
