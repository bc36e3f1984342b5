"""
Ikram - Menu Katalogu, Paket ve Isletme Ayarlari Testleri

Test edilen endpoint'ler:
    /api/v1/menu/categories   - Kategori CRUD
    /api/v1/menu/items        - Menu kalemi CRUD
    /api/v1/menu/templates    - Menu sablonu CRUD
    /api/v1/packages          - Paket CRUD + PDF
    /api/v1/settings          - Isletme ayarlari
"""

import uuid
from decimal import Decimal


def _create_category(client, auth_headers, name="Starters", display_order=0):
    response = client.post(
        "/api/v1/menu/categories",
        json={"name": name, "display_order": display_order},
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


def _create_item(client, auth_headers, category_id, name="Veg Spring Roll", price="120", **extra):
    response = client.post(
        "/api/v1/menu/items",
        json={"category_id": category_id, "name": name, "base_price": price, **extra},
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


PACKAGE_PAYLOAD = {
    "name": "Silver Package",
    "description": "Temel dugun menusu",
    "base_price_per_person": "600",
    "items": [
        {"item_type": "menu_item", "item_name": "Paneer Butter Masala", "unit_price": "200", "quantity_multiplier": "1"},
        {"item_type": "service", "item_name": "Waiters", "unit_price": "800", "quantity_multiplier": "0.1"},
    ],
}


class TestMenuCategories:
    """Kategori testleri."""

    def test_create_and_list(self, client, auth_headers):
        _create_category(client, auth_headers, "Desserts", 2)
        _create_category(client, auth_headers, "Starters", 1)
        response = client.get("/api/v1/menu/categories", headers=auth_headers)
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Starters", "Desserts"]

    def test_duplicate_name(self, client, auth_headers):
        _create_category(client, auth_headers, "Starters")
        response = client.post(
            "/api/v1/menu/categories", json={"name": "Starters"}, headers=auth_headers
        )
        assert response.status_code == 400

    def test_delete_category_keeps_items(self, client, auth_headers):
        """Kategori silinince kalemleri kategorisiz kalir."""
        category = _create_category(client, auth_headers)
        item = _create_item(client, auth_headers, category["id"])
        response = client.delete(f"/api/v1/menu/categories/{category['id']}", headers=auth_headers)
        assert response.status_code == 204
        response = client.get(f"/api/v1/menu/items/{item['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["category_id"] is None


class TestMenuItems:
    """Menu kalemi testleri."""

    def test_create_item(self, client, auth_headers):
        category = _create_category(client, auth_headers)
        item = _create_item(client, auth_headers, category["id"], is_vegetarian=False)
        assert item["name"] == "Veg Spring Roll"
        assert Decimal(item["base_price"]) == Decimal("120")
        assert item["unit"] == "per person"
        assert item["is_vegetarian"] is False
        assert item["is_active"] is True

    def test_create_item_unknown_category(self, client, auth_headers):
        response = client.post(
            "/api/v1/menu/items",
            json={"category_id": str(uuid.uuid4()), "name": "X", "base_price": "10"},
            headers=auth_headers,
        )
        assert response.status_code == 404

    def test_filter_active(self, client, auth_headers):
        category = _create_category(client, auth_headers)
        _create_item(client, auth_headers, category["id"], name="Active Item")
        _create_item(client, auth_headers, category["id"], name="Old Item", is_active=False)
        response = client.get("/api/v1/menu/items?is_active=true", headers=auth_headers)
        assert [i["name"] for i in response.json()] == ["Active Item"]

    def test_update_price(self, client, auth_headers):
        category = _create_category(client, auth_headers)
        item = _create_item(client, auth_headers, category["id"])
        response = client.put(
            f"/api/v1/menu/items/{item['id']}", json={"base_price": "150"}, headers=auth_headers
        )
        assert response.status_code == 200
        assert Decimal(response.json()["base_price"]) == Decimal("150")

    def test_item_in_template_cannot_be_deleted(self, client, auth_headers):
        category = _create_category(client, auth_headers)
        item = _create_item(client, auth_headers, category["id"])
        client.post(
            "/api/v1/menu/templates",
            json={"name": "Party", "items": [{"menu_item_id": item["id"]}]},
            headers=auth_headers,
        )
        response = client.delete(f"/api/v1/menu/items/{item['id']}", headers=auth_headers)
        assert response.status_code == 400

    def test_delete_unused_item(self, client, auth_headers):
        category = _create_category(client, auth_headers)
        item = _create_item(client, auth_headers, category["id"])
        response = client.delete(f"/api/v1/menu/items/{item['id']}", headers=auth_headers)
        assert response.status_code == 204


class TestMenuTemplates:
    """Menu sablonu testleri."""

    def test_create_template(self, client, auth_headers):
        category = _create_category(client, auth_headers)
        first = _create_item(client, auth_headers, category["id"], name="Soup")
        second = _create_item(client, auth_headers, category["id"], name="Salad")
        response = client.post(
            "/api/v1/menu/templates",
            json={
                "name": "Wedding Veg",
                "items": [
                    {"menu_item_id": first["id"], "quantity_multiplier": "1"},
                    {"menu_item_id": second["id"], "quantity_multiplier": "0.5"},
                ],
            },
            headers=auth_headers,
        )
        assert response.status_code == 201, response.text
        data = response.json()
        assert [i["menu_item"]["name"] for i in data["items"]] == ["Soup", "Salad"]
        assert [i["sort_order"] for i in data["items"]] == [0, 1]

    def test_update_replaces_items(self, client, auth_headers):
        category = _create_category(client, auth_headers)
        first = _create_item(client, auth_headers, category["id"], name="Soup")
        second = _create_item(client, auth_headers, category["id"], name="Salad")
        template = client.post(
            "/api/v1/menu/templates",
            json={"name": "Party", "items": [{"menu_item_id": first["id"]}]},
            headers=auth_headers,
        ).json()
        response = client.put(
            f"/api/v1/menu/templates/{template['id']}",
            json={"name": "Party Deluxe", "items": [{"menu_item_id": second["id"]}]},
            headers=auth_headers,
        )
        assert response.status_code == 200, response.text
        data = response.json()
        assert data["name"] == "Party Deluxe"
        assert [i["menu_item"]["name"] for i in data["items"]] == ["Salad"]

    def test_template_with_unknown_item(self, client, auth_headers):
        response = client.post(
            "/api/v1/menu/templates",
            json={"name": "Broken", "items": [{"menu_item_id": str(uuid.uuid4())}]},
            headers=auth_headers,
        )
        assert response.status_code == 404

    def test_templates_are_per_user(self, client, auth_headers, other_user_headers):
        client.post("/api/v1/menu/templates", json={"name": "Mine"}, headers=auth_headers)
        response = client.get("/api/v1/menu/templates", headers=other_user_headers)
        assert response.json() == []

    def test_delete_template(self, client, auth_headers):
        template = client.post(
            "/api/v1/menu/templates", json={"name": "Temp"}, headers=auth_headers
        ).json()
        response = client.delete(f"/api/v1/menu/templates/{template['id']}", headers=auth_headers)
        assert response.status_code == 204
        response = client.get(f"/api/v1/menu/templates/{template['id']}", headers=auth_headers)
        assert response.status_code == 404


class TestPackages:
    """Paket testleri."""

    def test_create_package(self, client, auth_headers):
        response = client.post("/api/v1/packages", json=PACKAGE_PAYLOAD, headers=auth_headers)
        assert response.status_code == 201, response.text
        data = response.json()
        assert data["name"] == "Silver Package"
        assert len(data["items"]) == 2
        assert data["items"][1]["item_type"] == "service"
        assert Decimal(data["items"][1]["quantity_multiplier"]) == Decimal("0.1")

    def test_update_replaces_items(self, client, auth_headers):
        package = client.post("/api/v1/packages", json=PACKAGE_PAYLOAD, headers=auth_headers).json()
        payload = {**PACKAGE_PAYLOAD, "items": PACKAGE_PAYLOAD["items"][:1]}
        response = client.put(f"/api/v1/packages/{package['id']}", json=payload, headers=auth_headers)
        assert response.status_code == 200, response.text
        assert len(response.json()["items"]) == 1

    def test_list_search(self, client, auth_headers):
        client.post("/api/v1/packages", json=PACKAGE_PAYLOAD, headers=auth_headers)
        client.post("/api/v1/packages", json={**PACKAGE_PAYLOAD, "name": "Gold Package"}, headers=auth_headers)
        response = client.get("/api/v1/packages?search=Gold", headers=auth_headers)
        assert [p["name"] for p in response.json()] == ["Gold Package"]

    def test_other_user_cannot_see(self, client, auth_headers, other_user_headers):
        package = client.post("/api/v1/packages", json=PACKAGE_PAYLOAD, headers=auth_headers).json()
        response = client.get(f"/api/v1/packages/{package['id']}", headers=other_user_headers)
        assert response.status_code == 404

    def test_delete_package(self, client, auth_headers):
        package = client.post("/api/v1/packages", json=PACKAGE_PAYLOAD, headers=auth_headers).json()
        response = client.delete(f"/api/v1/packages/{package['id']}", headers=auth_headers)
        assert response.status_code == 204

    def test_package_pdf(self, client, auth_headers):
        package = client.post("/api/v1/packages", json=PACKAGE_PAYLOAD, headers=auth_headers).json()
        response = client.get(f"/api/v1/packages/{package['id']}/pdf", headers=auth_headers)
        assert response.status_code == 200, response.text
        assert response.headers["content-type"] == "application/pdf"
        assert "Silver-Package.pdf" in response.headers["content-disposition"]


class TestCompanySettings:
    """Isletme ayarlari testleri."""

    def test_defaults_without_record(self, client, auth_headers):
        response = client.get("/api/v1/settings", headers=auth_headers)
        assert response.status_code == 200, response.text
        data = response.json()
        assert data["business_name"] == "The Royal Catering Service & Events"
        assert Decimal(data["default_tax_rate"]) == Decimal("18")

    def test_update_settings(self, client, auth_headers):
        response = client.put(
            "/api/v1/settings",
            json={"business_name": "Annapurna Caterers", "default_tax_rate": "5"},
            headers=auth_headers,
        )
        assert response.status_code == 200, response.text
        data = response.json()
        assert data["business_name"] == "Annapurna Caterers"

        response = client.get("/api/v1/settings", headers=auth_headers)
        assert Decimal(response.json()["default_tax_rate"]) == Decimal("5")

    def test_partial_update_keeps_other_fields(self, client, auth_headers):
        client.put("/api/v1/settings", json={"phone": "020-1234567"}, headers=auth_headers)
        response = client.put("/api/v1/settings", json={"upi_id": "royal@upi"}, headers=auth_headers)
        data = response.json()
        assert data["phone"] == "020-1234567"
        assert data["upi_id"] == "royal@upi"

    def test_default_tax_used_for_new_quotation(self, client, auth_headers, create_quotation):
        """Vergi orani verilmeyen teklif isletme varsayilanini kullanir."""
        client.put("/api/v1/settings", json={"default_tax_rate": "5"}, headers=auth_headers)
        quotation = create_quotation(tax_percentage=None)
        assert Decimal(quotation["tax_percentage"]) == Decimal("5")
