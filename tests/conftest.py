"""
Ikram - Test Yapilandirmasi (conftest.py)

SQLite in-memory veritabani kullanarak PostgreSQL gerektirmeden
tum API endpoint'lerini test etmeye olanak saglar.

Her test fonksiyonu icin temiz bir veritabani olusturulur (function scope).
"""

import uuid
from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from ikram.database import Base, get_db
from ikram.main import app
from ikram.rate_limit import limiter
from ikram.services.auth import hash_password, create_access_token

# Tum modelleri import et - Base.metadata.create_all icin gerekli
from ikram.models import User, Client, MenuCategory, MenuItem, Package, PackageItem

# Ayni IP'den gelen test isteklerine limit uygulanmasin
limiter.enabled = False


# ---------------------------------------------------------------------------
# SQLite In-Memory Test Veritabani
# ---------------------------------------------------------------------------

SQLITE_TEST_URL = "sqlite:///file::memory:?cache=shared"

ADMIN_EMAIL = "anita@royalcatering.in"
ADMIN_PASSWORD = "Biryani2026!"

test_engine = create_engine(
    SQLITE_TEST_URL,
    connect_args={"check_same_thread": False},
    echo=False,
)


# SQLite varsayilan olarak foreign key constraint'leri uygulamaz
@event.listens_for(test_engine, "connect")
def _set_sqlite_pragma(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="function")
def db_session():
    """
    Her test icin temiz bir veritabani oturumu olusturur.
    Test bittikten sonra tablolar silinir, boylece her test izole calisir.
    """
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(scope="function")
def client(db_session):
    """
    FastAPI TestClient olusturur.
    get_db dependency'si test veritabanina yonlendirilir.
    """
    def _override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = _override_get_db

    with TestClient(app, raise_server_exceptions=False) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def test_user(db_session):
    """
    Mutfak yoneticisi (admin).
    Sifre: ADMIN_PASSWORD
    """
    user = User(
        id=uuid.uuid4(),
        email=ADMIN_EMAIL,
        hashed_password=hash_password(ADMIN_PASSWORD),
        full_name="Anita Desai",
        is_active=True,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture(scope="function")
def auth_headers(test_user):
    """Dondurur: {"Authorization": "Bearer <jwt_token>"}"""
    token = create_access_token(test_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(scope="function")
def other_user_headers(db_session):
    """Baska bir kullanicinin token'i (sahiplik kontrolleri icin)."""
    user = User(
        id=uuid.uuid4(),
        email="vikram@spicecaterers.in",
        hashed_password=hash_password("Tandoor2026!"),
        full_name="Vikram Rao",
        is_active=True,
    )
    db_session.add(user)
    db_session.commit()
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture(scope="function")
def test_client_record(db_session, test_user):
    """test_user'a ait kayitli musteri."""
    record = Client(
        id=uuid.uuid4(),
        owner_id=test_user.id,
        name="Rahul Sharma",
        phone="9876543210",
        email="rahul@example.com",
        address="Pune",
    )
    db_session.add(record)
    db_session.commit()
    db_session.refresh(record)
    return record


@pytest.fixture(scope="function")
def quotation_payload():
    """
    Ornek teklif: 500 x 100 (menu) + 10000 x 1 (servis)
    %10 indirim, %18 vergi, 2000 servis ucreti, 20000 on odeme.
    Beklenen: subtotal 60000, grand_total 66080, balance_due 46080.
    """
    return {
        "client_name": "Rahul Sharma",
        "client_phone": "9876543210",
        "client_email": "rahul@example.com",
        "event_date": date(2026, 12, 15).isoformat(),
        "event_type": "Wedding",
        "event_venue": "Royal Garden",
        "number_of_guests": 100,
        "discount_percentage": "10",
        "tax_percentage": "18",
        "service_charges": "2000",
        "external_charges": "0",
        "advance_paid": "20000",
        "items": [
            {"item_type": "menu_item", "item_name": "Veg Biryani", "unit_price": "500", "quantity": 100},
            {"item_type": "service", "item_name": "Decoration", "unit_price": "10000", "quantity": 1},
        ],
    }


@pytest.fixture(scope="function")
def create_quotation(client, auth_headers, quotation_payload):
    """Teklif olusturan yardimci; alan degisiklikleri keyword ile verilir."""
    def _create(**overrides):
        payload = {**quotation_payload, **overrides}
        response = client.post("/api/v1/quotations", json=payload, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _create


@pytest.fixture(scope="function")
def test_menu_item(db_session):
    """Aktif bir menu kalemi (kategori ile birlikte)."""
    category = MenuCategory(id=uuid.uuid4(), name="Main Course", display_order=1)
    item = MenuItem(
        id=uuid.uuid4(),
        category=category,
        name="Paneer Tikka",
        base_price=Decimal("250.00"),
        unit="per person",
        is_vegetarian=True,
        is_active=True,
    )
    db_session.add_all([category, item])
    db_session.commit()
    db_session.refresh(item)
    return item


@pytest.fixture(scope="function")
def test_package(db_session, test_user):
    """Iki kalemli paket: carpanlar 1 ve 0.5."""
    package = Package(
        id=uuid.uuid4(),
        owner_id=test_user.id,
        name="Gold Package",
        base_price_per_person=Decimal("800.00"),
        is_active=True,
        items=[
            PackageItem(
                item_type="menu_item", item_name="Dal Makhani",
                unit_price=Decimal("150.00"), quantity_multiplier=Decimal("1"), sort_order=0,
            ),
            PackageItem(
                item_type="menu_item", item_name="Gulab Jamun",
                unit_price=Decimal("40.00"), quantity_multiplier=Decimal("0.5"), sort_order=1,
            ),
        ],
    )
    db_session.add(package)
    db_session.commit()
    db_session.refresh(package)
    return package


@pytest.fixture(scope="function")
def admin_login(test_user):
    """OAuth2 form verisi: test_user ile giris."""
    return {"username": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
