"""
Menu katalogu servisi.
Kategoriler ve menu kalemleri tum kullanicilar icin ortaktir;
sablonlar kullaniciya aittir.
"""
import uuid

from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from ikram.models.menu import MenuCategory, MenuItem, MenuTemplate, MenuTemplateItem
from ikram.schemas.menu import (
    MenuCategoryCreate, MenuCategoryUpdate,
    MenuItemCreate, MenuItemUpdate,
    MenuTemplateCreate,
)
from ikram.services.activity import log_activity


# ---------------------------------------------------------------------------
# Kategoriler
# ---------------------------------------------------------------------------

def get_categories(db: Session) -> list[MenuCategory]:
    return (
        db.query(MenuCategory)
        .order_by(MenuCategory.display_order.asc(), MenuCategory.name.asc())
        .all()
    )


def get_category(db: Session, category_id: uuid.UUID) -> MenuCategory:
    category = db.query(MenuCategory).filter(MenuCategory.id == category_id).first()
    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Kategori bulunamadi"
        )
    return category


def _ensure_unique_category_name(
    db: Session, name: str, exclude_id: uuid.UUID | None = None
) -> None:
    query = db.query(MenuCategory).filter(MenuCategory.name == name)
    if exclude_id:
        query = query.filter(MenuCategory.id != exclude_id)
    if query.first():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Bu isimde bir kategori zaten var",
        )


def create_category(
    db: Session, user_id: uuid.UUID, data: MenuCategoryCreate
) -> MenuCategory:
    _ensure_unique_category_name(db, data.name)
    category = MenuCategory(**data.model_dump())
    db.add(category)
    db.flush()
    log_activity(
        db, user_id, "create", "menu_category", category.id,
        f"Kategori '{category.name}' olusturuldu",
    )
    db.commit()
    db.refresh(category)
    return category


def update_category(
    db: Session, category_id: uuid.UUID, user_id: uuid.UUID, data: MenuCategoryUpdate
) -> MenuCategory:
    category = get_category(db, category_id)
    update_data = data.model_dump(exclude_unset=True)
    if update_data.get("name"):
        _ensure_unique_category_name(db, update_data["name"], exclude_id=category_id)
    for field, value in update_data.items():
        setattr(category, field, value)
    log_activity(
        db, user_id, "update", "menu_category", category_id,
        f"Kategori '{category.name}' guncellendi",
    )
    db.commit()
    db.refresh(category)
    return category


def delete_category(db: Session, category_id: uuid.UUID, user_id: uuid.UUID) -> None:
    """Kategoriyi sil. Kalemler silinmez, kategorisiz kalir."""
    category = get_category(db, category_id)
    name = category.name
    for item in category.items:
        item.category_id = None
    db.delete(category)
    log_activity(
        db, user_id, "delete", "menu_category", category_id,
        f"Kategori '{name}' silindi",
    )
    db.commit()


# ---------------------------------------------------------------------------
# Menu kalemleri
# ---------------------------------------------------------------------------

def get_menu_items(
    db: Session,
    category_id: uuid.UUID | None = None,
    is_active: bool | None = None,
    search: str | None = None,
) -> list[MenuItem]:
    """Menu kalemleri, kategori / aktiflik / isim filtresiyle."""
    query = db.query(MenuItem)
    if category_id:
        query = query.filter(MenuItem.category_id == category_id)
    if is_active is not None:
        query = query.filter(MenuItem.is_active == is_active)
    if search:
        query = query.filter(MenuItem.name.ilike(f"%{search}%"))
    return query.order_by(MenuItem.name.asc()).all()


def get_menu_item(db: Session, item_id: uuid.UUID) -> MenuItem:
    item = db.query(MenuItem).filter(MenuItem.id == item_id).first()
    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Menu kalemi bulunamadi"
        )
    return item


def create_menu_item(db: Session, user_id: uuid.UUID, data: MenuItemCreate) -> MenuItem:
    get_category(db, data.category_id)
    item = MenuItem(**data.model_dump())
    db.add(item)
    db.flush()
    log_activity(
        db, user_id, "create", "menu_item", item.id,
        f"Menu kalemi '{item.name}' olusturuldu",
    )
    db.commit()
    db.refresh(item)
    return item


def update_menu_item(
    db: Session, item_id: uuid.UUID, user_id: uuid.UUID, data: MenuItemUpdate
) -> MenuItem:
    item = get_menu_item(db, item_id)
    update_data = data.model_dump(exclude_unset=True)
    if update_data.get("category_id"):
        get_category(db, update_data["category_id"])
    for field, value in update_data.items():
        setattr(item, field, value)
    log_activity(
        db, user_id, "update", "menu_item", item_id,
        f"Menu kalemi '{item.name}' guncellendi",
    )
    db.commit()
    db.refresh(item)
    return item


def delete_menu_item(db: Session, item_id: uuid.UUID, user_id: uuid.UUID) -> None:
    """Sablonlarda kullanilan kalem silinemez; pasife alinmalidir."""
    item = get_menu_item(db, item_id)
    in_use = db.query(MenuTemplateItem).filter(
        MenuTemplateItem.menu_item_id == item_id
    ).first()
    if in_use:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Bu kalem bir menu sablonunda kullaniliyor, once pasife alin",
        )
    name = item.name
    db.delete(item)
    log_activity(
        db, user_id, "delete", "menu_item", item_id,
        f"Menu kalemi '{name}' silindi",
    )
    db.commit()


# ---------------------------------------------------------------------------
# Menu sablonlari
# ---------------------------------------------------------------------------

def get_templates(
    db: Session, owner_id: uuid.UUID, is_active: bool | None = None
) -> list[MenuTemplate]:
    query = db.query(MenuTemplate).filter(MenuTemplate.owner_id == owner_id)
    if is_active is not None:
        query = query.filter(MenuTemplate.is_active == is_active)
    return query.order_by(MenuTemplate.name.asc()).all()


def get_template(
    db: Session, template_id: uuid.UUID, owner_id: uuid.UUID
) -> MenuTemplate:
    template = db.query(MenuTemplate).filter(
        MenuTemplate.id == template_id, MenuTemplate.owner_id == owner_id
    ).first()
    if not template:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Menu sablonu bulunamadi"
        )
    return template


def _build_template_items(db: Session, data: MenuTemplateCreate) -> list[MenuTemplateItem]:
    items = []
    for index, item_data in enumerate(data.items):
        get_menu_item(db, item_data.menu_item_id)
        items.append(
            MenuTemplateItem(
                menu_item_id=item_data.menu_item_id,
                quantity_multiplier=item_data.quantity_multiplier,
                sort_order=index,
            )
        )
    return items


def create_template(
    db: Session, owner_id: uuid.UUID, data: MenuTemplateCreate
) -> MenuTemplate:
    template = MenuTemplate(
        owner_id=owner_id,
        name=data.name,
        description=data.description,
        is_active=data.is_active,
    )
    template.items = _build_template_items(db, data)
    db.add(template)
    db.flush()
    log_activity(
        db, owner_id, "create", "menu_template", template.id,
        f"Menu sablonu '{template.name}' olusturuldu ({len(template.items)} kalem)",
    )
    db.commit()
    db.refresh(template)
    return template


def update_template(
    db: Session, template_id: uuid.UUID, owner_id: uuid.UUID, data: MenuTemplateCreate
) -> MenuTemplate:
    """Sablon bilgilerini gunceller, kalemleri tamamen degistirir."""
    template = get_template(db, template_id, owner_id)
    template.name = data.name
    template.description = data.description
    template.is_active = data.is_active
    new_items = _build_template_items(db, data)
    template.items.clear()
    db.flush()
    template.items.extend(new_items)
    log_activity(
        db, owner_id, "update", "menu_template", template_id,
        f"Menu sablonu '{template.name}' guncellendi",
    )
    db.commit()
    db.refresh(template)
    return template


def delete_template(db: Session, template_id: uuid.UUID, owner_id: uuid.UUID) -> None:
    template = get_template(db, template_id, owner_id)
    name = template.name
    db.delete(template)
    log_activity(
        db, owner_id, "delete", "menu_template", template_id,
        f"Menu sablonu '{name}' silindi",
    )
    db.commit()
