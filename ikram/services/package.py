import uuid

from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ikram.models.package import Package, PackageItem
from ikram.schemas.package import PackageCreate
from ikram.services.activity import log_activity


def get_packages(
    db: Session, owner_id: uuid.UUID,
    is_active: bool | None = None, search: str | None = None,
) -> list[Package]:
    query = db.query(Package).filter(Package.owner_id == owner_id)
    if is_active is not None:
        query = query.filter(Package.is_active == is_active)
    if search:
        query = query.filter(Package.name.ilike(f"%{search}%"))
    return query.order_by(Package.name.asc()).all()


def get_package(db: Session, package_id: uuid.UUID, owner_id: uuid.UUID) -> Package:
    package = db.query(Package).filter(
        Package.id == package_id, Package.owner_id == owner_id
    ).first()
    if not package:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Paket bulunamadi")
    return package


def _build_items(data: PackageCreate) -> list[PackageItem]:
    return [
        PackageItem(sort_order=index, **item.model_dump())
        for index, item in enumerate(data.items)
    ]


def create_package(db: Session, owner_id: uuid.UUID, data: PackageCreate) -> Package:
    package = Package(
        owner_id=owner_id,
        name=data.name,
        description=data.description,
        base_price_per_person=data.base_price_per_person,
        is_active=data.is_active,
    )
    package.items = _build_items(data)
    db.add(package)
    db.flush()
    log_activity(
        db, owner_id, "create", "package", package.id,
        f"Paket '{package.name}' olusturuldu",
    )
    db.commit()
    db.refresh(package)
    return package


def update_package(
    db: Session, package_id: uuid.UUID, owner_id: uuid.UUID, data: PackageCreate
) -> Package:
    """Paket bilgilerini gunceller; kalemler silinip yeniden eklenir."""
    package = get_package(db, package_id, owner_id)
    package.name = data.name
    package.description = data.description
    package.base_price_per_person = data.base_price_per_person
    package.is_active = data.is_active
    package.items.clear()
    db.flush()
    package.items.extend(_build_items(data))
    log_activity(
        db, owner_id, "update", "package", package_id,
        f"Paket '{package.name}' guncellendi",
    )
    db.commit()
    db.refresh(package)
    return package


def delete_package(db: Session, package_id: uuid.UUID, owner_id: uuid.UUID) -> None:
    package = get_package(db, package_id, owner_id)
    name = package.name
    db.delete(package)
    log_activity(
        db, owner_id, "delete", "package", package_id,
        f"Paket '{name}' silindi",
    )
    db.commit()
