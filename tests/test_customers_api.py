"""
Tests for the customers API.
"""

import uuid

import pytest

from apps.crm.models import Customer


@pytest.mark.django_db
class TestCustomersAPI:
    url = "/api/customers"

    def test_create(self, admin_api_client):
        response = admin_api_client.post(
            self.url, {"name": "IT World Shop", "phone": "081-567-8901"}, format="json"
        )

        assert response.status_code == 201
        customer = response.data["customer"]
        assert customer["name"] == "IT World Shop"
        assert customer["phone"] == "081-567-8901"
        assert customer["email"] == ""
        assert "createdAt" in customer

    def test_name_required(self, admin_api_client):
        response = admin_api_client.post(self.url, {"phone": "02-000-0000"}, format="json")

        assert response.status_code == 400
        assert response.data == {"error": "name: Customer name is required."}
        assert Customer.objects.count() == 0

    def test_list_and_search(self, admin_api_client, customer):
        Customer.objects.create(name="IT World Shop", email="itworld@gmail.com")

        everyone = admin_api_client.get(self.url)
        by_email = admin_api_client.get(self.url, {"search": "GMAIL"})
        by_phone = admin_api_client.get(self.url, {"search": "123-4567"})

        assert len(everyone.data["customers"]) == 2
        assert [c["name"] for c in by_email.data["customers"]] == ["IT World Shop"]
        assert [c["name"] for c in by_phone.data["customers"]] == [customer.name]

    def test_update(self, admin_api_client, customer):
        response = admin_api_client.patch(
            f"{self.url}/{customer.id}", {"email": "new@thaitech.co.th"}, format="json"
        )

        assert response.status_code == 200
        assert response.data["customer"]["email"] == "new@thaitech.co.th"
        assert response.data["customer"]["name"] == customer.name

    def test_update_unknown(self, admin_api_client):
        response = admin_api_client.patch(f"{self.url}/{uuid.uuid4()}", {"name": "x"}, format="json")

        assert response.status_code == 404
        assert response.data == {"error": "Customer not found."}

    def test_delete_keeps_document_snapshot(self, admin_api_client, customer, quotation):
        response = admin_api_client.delete(f"{self.url}/{customer.id}")

        assert response.status_code == 200
        quotation.refresh_from_db()
        assert quotation.customer is None
        assert quotation.customer_name == "Thai Technology Co., Ltd."

    def test_requires_authentication(self, api_client, db):
        assert api_client.get(self.url).status_code == 401
