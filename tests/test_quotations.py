"""
Ikram - Teklif (Quotation) Testleri

Test edilen endpoint'ler:
    POST   /api/v1/quotations                 - Teklif olusturma
    GET    /api/v1/quotations                 - Teklif listeleme
    GET    /api/v1/quotations/next-number     - Siradaki numara
    GET    /api/v1/quotations/{id}            - Teklif detay
    PUT    /api/v1/quotations/{id}            - Teklif guncelleme (versiyon gecmisi)
    DELETE /api/v1/quotations/{id}            - Teklif silme
    GET    /api/v1/quotations/prefill         - Paket/sablondan kalem doldurma
    POST   /api/v1/quotations/{id}/share-link - Musteri linki
    GET    /api/v1/quotations/{id}/pdf        - PDF cikti
"""

import uuid
from decimal import Decimal

from ikram.models.activity import Activity
from ikram.models.menu import MenuTemplate, MenuTemplateItem
from ikram.services.document import html_to_pdf


class TestCreateQuotation:
    """Teklif olusturma testleri."""

    def test_create_quotation(self, client, auth_headers, quotation_payload):
        """Yeni teklif taslak olarak ve hesaplanmis tutarlarla olusmali."""
        response = client.post("/api/v1/quotations", json=quotation_payload, headers=auth_headers)
        assert response.status_code == 201, response.text
        data = response.json()
        assert data["quotation_number"] == "QUOTE-0001"
        assert data["status"] == "draft"
        assert data["approval_status"] == "draft"
        assert data["version"] == 1
        assert len(data["items"]) == 2
        assert Decimal(data["subtotal"]) == Decimal("60000")
        assert Decimal(data["discount_amount"]) == Decimal("6000")
        assert Decimal(data["tax_amount"]) == Decimal("10080")
        assert Decimal(data["grand_total"]) == Decimal("66080")
        assert Decimal(data["balance_due"]) == Decimal("46080")
        assert data["payment_status"] == "partial"
        assert data["latest_response"] is None

    def test_item_totals_and_order(self, create_quotation):
        """Kalem toplamlari unit_price x quantity, sira gonderim sirasi."""
        data = create_quotation()
        first, second = data["items"]
        assert first["item_name"] == "Veg Biryani"
        assert Decimal(first["total"]) == Decimal("50000")
        assert first["sort_order"] == 0
        assert second["item_type"] == "service"
        assert second["sort_order"] == 1

    def test_sequential_numbers(self, create_quotation):
        """Numaralar sirali artmali: QUOTE-0001, QUOTE-0002."""
        first = create_quotation()
        second = create_quotation()
        assert first["quotation_number"] == "QUOTE-0001"
        assert second["quotation_number"] == "QUOTE-0002"

    def test_deleted_number_not_reused(self, client, auth_headers, create_quotation):
        """Aradaki teklif silinince bosluk doldurulmaz, en buyuk numaradan devam edilir."""
        create_quotation()
        second = create_quotation()
        third = create_quotation()
        client.delete(f"/api/v1/quotations/{second['id']}", headers=auth_headers)
        assert create_quotation()["quotation_number"] == "QUOTE-0004"
        assert third["quotation_number"] == "QUOTE-0003"

    def test_next_number(self, client, auth_headers, create_quotation):
        create_quotation()
        response = client.get("/api/v1/quotations/next-number", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["quotation_number"] == "QUOTE-0002"

    def test_default_terms_and_validity(self, create_quotation):
        """Sartlar ve gecerlilik suresi verilmezse varsayilanlar atanmali."""
        data = create_quotation()
        assert data["validity_days"] == 30
        assert data["terms_and_conditions"]

    def test_linked_client(self, create_quotation, test_client_record):
        data = create_quotation(client_id=str(test_client_record.id))
        assert data["client_id"] == str(test_client_record.id)

    def test_unknown_client_id(self, client, auth_headers, quotation_payload):
        """Kayitli olmayan musteri ID'si ile teklif olusturulamamali."""
        payload = {**quotation_payload, "client_id": str(uuid.uuid4())}
        response = client.post("/api/v1/quotations", json=payload, headers=auth_headers)
        assert response.status_code == 404

    def test_missing_client_name(self, client, auth_headers, quotation_payload):
        payload = {**quotation_payload, "client_name": ""}
        response = client.post("/api/v1/quotations", json=payload, headers=auth_headers)
        assert response.status_code == 422

    def test_invalid_item_type(self, client, auth_headers, quotation_payload):
        payload = {
            **quotation_payload,
            "items": [{"item_type": "gift", "item_name": "X", "unit_price": "10", "quantity": 1}],
        }
        response = client.post("/api/v1/quotations", json=payload, headers=auth_headers)
        assert response.status_code == 422

    def test_create_logs_activity(self, db_session, create_quotation):
        """Olusturma islemi aktivite kaydina yazilmali."""
        data = create_quotation()
        activity = db_session.query(Activity).filter(
            Activity.entity_type == "quotation", Activity.action == "create"
        ).first()
        assert activity is not None
        assert str(activity.entity_id) == data["id"]

    def test_create_without_auth(self, client, quotation_payload):
        response = client.post("/api/v1/quotations", json=quotation_payload)
        assert response.status_code == 401


class TestGetQuotation:
    """Teklif detay ve listeleme testleri."""

    def test_get_quotation(self, client, auth_headers, create_quotation):
        created = create_quotation()
        response = client.get(f"/api/v1/quotations/{created['id']}", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["quotation_number"] == created["quotation_number"]
        assert Decimal(data["grand_total"]) == Decimal("66080")

    def test_get_not_found(self, client, auth_headers):
        response = client.get(f"/api/v1/quotations/{uuid.uuid4()}", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["detail"] == "Teklif bulunamadi"

    def test_other_user_cannot_see(self, client, other_user_headers, create_quotation):
        """Baska kullanicinin teklifi gorunmemeli."""
        created = create_quotation()
        response = client.get(f"/api/v1/quotations/{created['id']}", headers=other_user_headers)
        assert response.status_code == 404

    def test_list_and_search(self, client, auth_headers, create_quotation):
        create_quotation()
        create_quotation(client_name="Priya Patel", client_phone="9000000000")

        response = client.get("/api/v1/quotations", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["total"] == 2

        response = client.get("/api/v1/quotations?search=Priya", headers=auth_headers)
        data = response.json()
        assert data["total"] == 1
        assert data["items"][0]["client_name"] == "Priya Patel"

    def test_list_filter_by_status(self, client, auth_headers, create_quotation):
        first = create_quotation()
        create_quotation()
        client.patch(
            f"/api/v1/quotations/{first['id']}/status",
            json={"status": "sent"},
            headers=auth_headers,
        )
        response = client.get("/api/v1/quotations?status=sent", headers=auth_headers)
        data = response.json()
        assert data["total"] == 1
        assert data["items"][0]["id"] == first["id"]

    def test_list_sort_by_total(self, client, auth_headers, create_quotation):
        create_quotation()
        create_quotation(items=[{"item_name": "Tea", "unit_price": "20", "quantity": 10}])
        response = client.get("/api/v1/quotations?sort=total_asc", headers=auth_headers)
        totals = [Decimal(q["grand_total"]) for q in response.json()["items"]]
        assert totals == sorted(totals)

    def test_list_pagination(self, client, auth_headers, create_quotation):
        for _ in range(3):
            create_quotation()
        response = client.get("/api/v1/quotations?page=2&size=2", headers=auth_headers)
        data = response.json()
        assert data["total"] == 3
        assert len(data["items"]) == 1


class TestUpdateQuotation:
    """Teklif guncelleme ve versiyon gecmisi testleri."""

    def test_saved_totals_match_reload(self, client, auth_headers, create_quotation, quotation_payload):
        """Kaydedilen tutarlar tekrar okununca ayni olmali."""
        created = create_quotation()
        payload = {**quotation_payload, "discount_percentage": "0"}
        response = client.put(f"/api/v1/quotations/{created['id']}", json=payload, headers=auth_headers)
        assert response.status_code == 200, response.text
        saved = response.json()

        reloaded = client.get(f"/api/v1/quotations/{created['id']}", headers=auth_headers).json()
        for field in ("subtotal", "discount_amount", "tax_amount", "grand_total", "balance_due"):
            assert Decimal(saved[field]) == Decimal(reloaded[field])
        # 60000 + 2000 = 62000, %18 vergi = 11160 -> 73160
        assert Decimal(reloaded["grand_total"]) == Decimal("73160")

    def test_pricing_change_creates_version(self, client, auth_headers, create_quotation, quotation_payload):
        """Fiyat degisikliginde onceki hal versiyon olarak saklanmali."""
        created = create_quotation()
        payload = {**quotation_payload, "discount_percentage": "5", "edit_reason": "Musteri pazarligi"}
        response = client.put(f"/api/v1/quotations/{created['id']}", json=payload, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["version"] == 2

        versions = client.get(f"/api/v1/quotations/{created['id']}/versions", headers=auth_headers).json()
        assert len(versions) == 1
        assert versions[0]["version"] == 1
        assert versions[0]["edit_reason"] == "Musteri pazarligi"
        assert "discount_percentage" in versions[0]["changes_summary"]
        assert versions[0]["quotation_data"]["grand_total"] == "66080.00"

    def test_item_change_creates_version(self, client, auth_headers, create_quotation, quotation_payload):
        created = create_quotation()
        payload = {**quotation_payload, "items": quotation_payload["items"][:1]}
        response = client.put(f"/api/v1/quotations/{created['id']}", json=payload, headers=auth_headers)
        data = response.json()
        assert data["version"] == 2
        assert len(data["items"]) == 1
        assert Decimal(data["subtotal"]) == Decimal("50000")

    def test_header_change_keeps_version(self, client, auth_headers, create_quotation, quotation_payload):
        """Sadece musteri/etkinlik bilgisi degisirse versiyon artmamali."""
        created = create_quotation()
        payload = {**quotation_payload, "event_venue": "Lake View Hall"}
        response = client.put(f"/api/v1/quotations/{created['id']}", json=payload, headers=auth_headers)
        data = response.json()
        assert data["event_venue"] == "Lake View Hall"
        assert data["version"] == 1
        versions = client.get(f"/api/v1/quotations/{created['id']}/versions", headers=auth_headers).json()
        assert versions == []

    def test_update_not_found(self, client, auth_headers, quotation_payload):
        response = client.put(f"/api/v1/quotations/{uuid.uuid4()}", json=quotation_payload, headers=auth_headers)
        assert response.status_code == 404


class TestDeleteQuotation:
    """Teklif silme testleri."""

    def test_delete_quotation(self, client, auth_headers, create_quotation):
        created = create_quotation()
        response = client.delete(f"/api/v1/quotations/{created['id']}", headers=auth_headers)
        assert response.status_code == 204
        response = client.get(f"/api/v1/quotations/{created['id']}", headers=auth_headers)
        assert response.status_code == 404

    def test_delete_not_found(self, client, auth_headers):
        response = client.delete(f"/api/v1/quotations/{uuid.uuid4()}", headers=auth_headers)
        assert response.status_code == 404


class TestPrefill:
    """Paket ve menu sablonundan kalem doldurma testleri."""

    def test_prefill_from_package(self, client, auth_headers, test_package):
        """Miktar = carpan x misafir sayisi (yuvarlanarak)."""
        response = client.get(
            f"/api/v1/quotations/prefill?package_id={test_package.id}&guests=101",
            headers=auth_headers,
        )
        assert response.status_code == 200, response.text
        data = response.json()
        assert data["source"] == "package"
        quantities = [item["quantity"] for item in data["items"]]
        # 1 x 101 = 101, 0.5 x 101 = 50.5 -> 51
        assert quantities == [101, 51]

    def test_prefill_from_template(self, client, auth_headers, db_session, test_user, test_menu_item):
        """Sablondaki aktif kalemler guncel taban fiyatiyla gelmeli."""
        template = MenuTemplate(
            owner_id=test_user.id,
            name="Wedding Veg",
            items=[MenuTemplateItem(menu_item_id=test_menu_item.id, quantity_multiplier=Decimal("2"), sort_order=0)],
        )
        db_session.add(template)
        db_session.commit()

        response = client.get(
            f"/api/v1/quotations/prefill?template_id={template.id}&guests=50",
            headers=auth_headers,
        )
        assert response.status_code == 200, response.text
        items = response.json()["items"]
        assert len(items) == 1
        assert items[0]["item_name"] == "Paneer Tikka"
        assert items[0]["quantity"] == 100
        assert Decimal(items[0]["unit_price"]) == Decimal("250")

    def test_prefill_requires_one_source(self, client, auth_headers):
        response = client.get("/api/v1/quotations/prefill?guests=10", headers=auth_headers)
        assert response.status_code == 400

    def test_prefill_unknown_package(self, client, auth_headers):
        response = client.get(
            f"/api/v1/quotations/prefill?package_id={uuid.uuid4()}&guests=10",
            headers=auth_headers,
        )
        assert response.status_code == 404


class TestShareAndPdf:
    """Musteri linki ve PDF testleri."""

    def test_share_link(self, client, auth_headers, create_quotation):
        created = create_quotation()
        response = client.post(f"/api/v1/quotations/{created['id']}/share-link", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["url"].endswith(f"/quotation/{created['id']}")
        assert data["status"] == "sent"

    def test_shared_draft_opens_for_client(self, client, auth_headers, db_session, create_quotation):
        """Paylasilan taslak gonderildi olur ve link musteri icin acilir."""
        created = create_quotation()
        url = client.post(f"/api/v1/quotations/{created['id']}/share-link", headers=auth_headers).json()["url"]
        quotation_id = url.rsplit("/", 1)[-1]

        response = client.get(f"/api/v1/public/quotations/{quotation_id}")
        assert response.status_code == 200, response.text
        assert response.json()["can_respond"] is True

        actions = [a.action for a in db_session.query(Activity).filter(Activity.entity_type == "quotation")]
        assert actions.count("status_change") == 1

    def test_share_keeps_closed_status(self, client, auth_headers, create_quotation):
        """Kabul edilmis teklifin linki durumu degistirmez."""
        created = create_quotation()
        client.patch(
            f"/api/v1/quotations/{created['id']}/status", json={"status": "accepted"}, headers=auth_headers
        )
        response = client.post(f"/api/v1/quotations/{created['id']}/share-link", headers=auth_headers)
        assert response.json()["status"] == "accepted"

    def test_pdf(self, client, auth_headers, create_quotation):
        created = create_quotation()
        response = client.get(f"/api/v1/quotations/{created['id']}/pdf", headers=auth_headers)
        assert response.status_code == 200, response.text
        assert response.headers["content-type"] == "application/pdf"
        assert "QUOTE-0001" in response.headers["content-disposition"]
        assert response.content.startswith(b"%PDF")

    def test_html_to_pdf_accepts_text(self):
        """Render edilmis HTML metni dogrudan PDF'e cevrilir."""
        content = html_to_pdf("<html><body><p>Dal Makhani &amp; Naan</p></body></html>", "deneme.pdf")
        assert content.startswith(b"%PDF")

    def test_pdf_not_found(self, client, auth_headers):
        response = client.get(f"/api/v1/quotations/{uuid.uuid4()}/pdf", headers=auth_headers)
        assert response.status_code == 404
