import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class DashboardStats(BaseModel):
    total_clients: int
    total_quotations: int
    total_revenue: Decimal
    accepted_revenue: Decimal
    conversion_rate: Decimal
    average_order_value: Decimal
    status_counts: dict[str, int]
    approval_counts: dict[str, int]
    total_received: Decimal
    total_order_expenses: Decimal
    total_event_expenses: Decimal
    upcoming_events: int


class ActivityResponse(BaseModel):
    """Islem gecmisi kaydi"""
    id: uuid.UUID
    action: str
    entity_type: str
    entity_id: uuid.UUID | None
    description: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ActivityListResponse(BaseModel):
    items: list[ActivityResponse]
    total: int
    page: int
    size: int
