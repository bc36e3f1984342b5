"""
Ikram - Musteri (Client) Testleri

Test edilen endpoint'ler:
    POST   /api/v1/clients                    - Musteri olusturma
    GET    /api/v1/clients                    - Musteri listeleme
    GET    /api/v1/clients/{id}               - Musteri detay
    GET    /api/v1/clients/{id}/quotations    - Musteriye bagli teklifler
    PUT    /api/v1/clients/{id}               - Musteri guncelleme
    DELETE /api/v1/clients/{id}               - Musteri silme
"""

import uuid


class TestCreateClient:
    """Musteri olusturma testleri."""

    def test_create_client(self, client, auth_headers):
        response = client.post(
            "/api/v1/clients",
            json={
                "name": "Priya Patel",
                "phone": "9000000001",
                "email": "priya@example.com",
                "company_name": "Patel Industries",
                "address": "Ahmedabad",
            },
            headers=auth_headers,
        )
        assert response.status_code == 201, response.text
        data = response.json()
        assert data["name"] == "Priya Patel"
        assert data["company_name"] == "Patel Industries"
        assert "id" in data
        assert "created_at" in data

    def test_create_client_minimal(self, client, auth_headers):
        """Sadece ad ve telefon ile musteri olusturulabilmeli."""
        response = client.post(
            "/api/v1/clients",
            json={"name": "Minimal", "phone": "9000000002"},
            headers=auth_headers,
        )
        assert response.status_code == 201, response.text
        assert response.json()["email"] is None

    def test_create_client_without_phone(self, client, auth_headers):
        response = client.post("/api/v1/clients", json={"name": "Telefonsuz"}, headers=auth_headers)
        assert response.status_code == 422

    def test_create_client_invalid_email(self, client, auth_headers):
        response = client.post(
            "/api/v1/clients",
            json={"name": "X", "phone": "1", "email": "gecersiz"},
            headers=auth_headers,
        )
        assert response.status_code == 422

    def test_create_client_without_auth(self, client):
        response = client.post("/api/v1/clients", json={"name": "X", "phone": "1"})
        assert response.status_code == 401


class TestListClients:
    """Musteri listeleme testleri."""

    def test_list_clients(self, client, auth_headers, test_client_record):
        response = client.get("/api/v1/clients", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["items"][0]["name"] == "Rahul Sharma"

    def test_search_by_phone(self, client, auth_headers, test_client_record):
        response = client.get("/api/v1/clients?search=98765", headers=auth_headers)
        assert response.json()["total"] == 1
        response = client.get("/api/v1/clients?search=yok", headers=auth_headers)
        assert response.json()["total"] == 0

    def test_sort_by_name(self, client, auth_headers, test_client_record):
        client.post("/api/v1/clients", json={"name": "Anil Kumar", "phone": "1"}, headers=auth_headers)
        response = client.get("/api/v1/clients?sort_by=name&sort_order=asc", headers=auth_headers)
        names = [c["name"] for c in response.json()["items"]]
        assert names == ["Anil Kumar", "Rahul Sharma"]

    def test_other_user_clients_hidden(self, client, other_user_headers, test_client_record):
        response = client.get("/api/v1/clients", headers=other_user_headers)
        assert response.json()["total"] == 0


class TestGetClient:
    """Musteri detay testleri."""

    def test_get_client(self, client, auth_headers, test_client_record):
        response = client.get(f"/api/v1/clients/{test_client_record.id}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["phone"] == "9876543210"

    def test_get_client_not_found(self, client, auth_headers):
        response = client.get(f"/api/v1/clients/{uuid.uuid4()}", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["detail"] == "Musteri bulunamadi"

    def test_client_quotations(self, client, auth_headers, test_client_record, create_quotation):
        """Sadece bu musteriye bagli teklifler donmeli."""
        linked = create_quotation(client_id=str(test_client_record.id))
        create_quotation()
        response = client.get(
            f"/api/v1/clients/{test_client_record.id}/quotations", headers=auth_headers
        )
        assert response.status_code == 200
        data = response.json()
        assert [q["id"] for q in data] == [linked["id"]]


class TestUpdateClient:
    """Musteri guncelleme testleri."""

    def test_partial_update(self, client, auth_headers, test_client_record):
        response = client.put(
            f"/api/v1/clients/{test_client_record.id}",
            json={"secondary_phone": "9123456789"},
            headers=auth_headers,
        )
        assert response.status_code == 200, response.text
        data = response.json()
        assert data["secondary_phone"] == "9123456789"
        assert data["name"] == "Rahul Sharma"

    def test_update_not_found(self, client, auth_headers):
        response = client.put(
            f"/api/v1/clients/{uuid.uuid4()}", json={"name": "X"}, headers=auth_headers
        )
        assert response.status_code == 404


class TestDeleteClient:
    """Musteri silme testleri."""

    def test_delete_client_keeps_quotations(self, client, auth_headers, test_client_record, create_quotation):
        """Musteri silinince teklifler kalir, baglantisi kopar."""
        quotation = create_quotation(client_id=str(test_client_record.id))
        response = client.delete(f"/api/v1/clients/{test_client_record.id}", headers=auth_headers)
        assert response.status_code == 204

        response = client.get(f"/api/v1/quotations/{quotation['id']}", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["client_id"] is None
        assert data["client_name"] == "Rahul Sharma"

    def test_delete_not_found(self, client, auth_headers):
        response = client.delete(f"/api/v1/clients/{uuid.uuid4()}", headers=auth_headers)
        assert response.status_code == 404
