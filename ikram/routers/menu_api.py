"""
Menu katalog API: kategoriler, menu kalemleri ve menu sablonlari.
"""
import uuid

from fastapi import APIRouter, Query, status

from ikram.dependencies import CurrentUser, DbSession
from ikram.schemas.menu import (
    MenuCategoryCreate, MenuCategoryUpdate, MenuCategoryResponse,
    MenuItemCreate, MenuItemUpdate, MenuItemResponse,
    MenuTemplateCreate, MenuTemplateResponse,
)
from ikram.services import menu as menu_service

router = APIRouter()


# --- Kategoriler ---

@router.get("/categories", response_model=list[MenuCategoryResponse])
def list_categories(db: DbSession, current_user: CurrentUser):
    return menu_service.get_categories(db)


@router.post("/categories", response_model=MenuCategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(data: MenuCategoryCreate, db: DbSession, current_user: CurrentUser):
    return menu_service.create_category(db, current_user.id, data)


@router.put("/categories/{category_id}", response_model=MenuCategoryResponse)
def update_category(
    category_id: uuid.UUID, data: MenuCategoryUpdate, db: DbSession, current_user: CurrentUser
):
    return menu_service.update_category(db, category_id, current_user.id, data)


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    menu_service.delete_category(db, category_id, current_user.id)


# --- Menu kalemleri ---

@router.get("/items", response_model=list[MenuItemResponse])
def list_menu_items(
    db: DbSession,
    current_user: CurrentUser,
    category_id: uuid.UUID | None = Query(default=None, description="Kategori filtresi"),
    is_active: bool | None = Query(default=None, description="Aktiflik filtresi"),
    search: str | None = Query(default=None, description="Isimde arama"),
):
    return menu_service.get_menu_items(db, category_id=category_id, is_active=is_active, search=search)


@router.post("/items", response_model=MenuItemResponse, status_code=status.HTTP_201_CREATED)
def create_menu_item(data: MenuItemCreate, db: DbSession, current_user: CurrentUser):
    return menu_service.create_menu_item(db, current_user.id, data)


@router.get("/items/{item_id}", response_model=MenuItemResponse)
def get_menu_item(item_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    return menu_service.get_menu_item(db, item_id)


@router.put("/items/{item_id}", response_model=MenuItemResponse)
def update_menu_item(
    item_id: uuid.UUID, data: MenuItemUpdate, db: DbSession, current_user: CurrentUser
):
    return menu_service.update_menu_item(db, item_id, current_user.id, data)


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_menu_item(item_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    menu_service.delete_menu_item(db, item_id, current_user.id)


# --- Menu sablonlari ---

@router.get("/templates", response_model=list[MenuTemplateResponse])
def list_templates(
    db: DbSession,
    current_user: CurrentUser,
    is_active: bool | None = Query(default=None),
):
    return menu_service.get_templates(db, current_user.id, is_active=is_active)


@router.post("/templates", response_model=MenuTemplateResponse, status_code=status.HTTP_201_CREATED)
def create_template(data: MenuTemplateCreate, db: DbSession, current_user: CurrentUser):
    return menu_service.create_template(db, current_user.id, data)


@router.get("/templates/{template_id}", response_model=MenuTemplateResponse)
def get_template(template_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    return menu_service.get_template(db, template_id, current_user.id)


@router.put("/templates/{template_id}", response_model=MenuTemplateResponse)
def update_template(
    template_id: uuid.UUID, data: MenuTemplateCreate, db: DbSession, current_user: CurrentUser
):
    """Sablonu guncelle. Kalemler tamamen degistirilir."""
    return menu_service.update_template(db, template_id, current_user.id, data)


@router.delete("/templates/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_template(template_id: uuid.UUID, db: DbSession, current_user: CurrentUser):
    menu_service.delete_template(db, template_id, current_user.id)
