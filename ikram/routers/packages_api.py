import io
import uuid

from fastapi import APIRouter, Query, status
from fastapi.responses import StreamingResponse

from ikram.dependencies import CurrentUser, DbSession
from ikram.schemas.package import PackageCreate, PackageResponse
from ikram.services import document as document_service
from ikram.services import package as package_service

router = APIRouter()


@router.get("", response_model=list[PackageResponse])
def list_packages(
    db: DbSession,
    current_user: CurrentUser,
    is_active: bool | None = Query(default=None),
    search: str | None = Query(default=None, description="Paket adinda arama"),
):
    return package_service.get_packages(db, current_user.id, is_active=is_active, search=search)


@router.post("", response_model=PackageResponse, status_code=status.HTTP_201_CREATED)
def create_package(data: PackageCreate, db: DbSession, current_user: CurrentUser):
    return package_service.create_package(db, current_user.id, data)


@router.get("/{package_id}", response_model=PackageResponse)
def get_package(package_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    return package_service.get_package(db, package_id, current_user.id)


@router.put("/{package_id}", response_model=PackageResponse)
def update_package(
    package_id: uuid.UUID, data: PackageCreate, db: DbSession, current_user: CurrentUser
):
    """Paketi guncelle. Kalemler tamamen degistirilir."""
    return package_service.update_package(db, package_id, current_user.id, data)


@router.delete("/{package_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_package(package_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    package_service.delete_package(db, package_id, current_user.id)


@router.get("/{package_id}/pdf")
def package_pdf(package_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    """Paket brosurunu PDF olarak indir."""
    filename, content = document_service.package_pdf(db, package_id, current_user.id)
    return StreamingResponse(
        io.BytesIO(content),
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
