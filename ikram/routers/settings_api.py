from fastapi import APIRouter

from ikram.dependencies import CurrentUser, DbSession
from ikram.schemas.company import CompanySettingsResponse, CompanySettingsUpdate
from ikram.services import company as company_service

router = APIRouter()


@router.get("", response_model=CompanySettingsResponse)
def get_settings(db: DbSession, current_user: CurrentUser):
    """Isletme ayarlari. Kayit yoksa varsayilanlar doner."""
    return company_service.get_company_settings(db, current_user.id)


@router.put("", response_model=CompanySettingsResponse)
def save_settings(data: CompanySettingsUpdate, db: DbSession, current_user: CurrentUser):
    return company_service.upsert_company_settings(db, current_user.id, data)
