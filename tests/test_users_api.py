"""
Tests for owner-only user management.
"""

import uuid

from django.contrib.auth import get_user_model

import pytest

User = get_user_model()


@pytest.mark.django_db
class TestUserList:
    def test_owner_lists_users(self, owner_client, owner_user, admin_user):
        response = owner_client.get("/api/users")

        assert response.status_code == 200
        assert [u["username"] for u in response.data["users"]] == ["owner", "clerk"]
        assert "password" not in response.data["users"][0]

    def test_admin_is_forbidden(self, admin_api_client):
        response = admin_api_client.get("/api/users")

        assert response.status_code == 403
        assert response.data == {"error": "Only the shop owner can access this resource."}


@pytest.mark.django_db
class TestInvite:
    url = "/api/users/invite"

    def test_invite_defaults_to_admin(self, owner_client, api_client):
        response = owner_client.post(
            self.url,
            {"username": "cashier", "password": "Str0ng-Passw0rd", "fullName": "Front Counter"},
            format="json",
        )

        assert response.status_code == 201
        assert response.data["user"]["role"] == "admin"
        assert response.data["user"]["fullName"] == "Front Counter"

        login = api_client.post(
            "/api/auth/login",
            {"username": "cashier", "password": "Str0ng-Passw0rd"},
            format="json",
        )
        assert login.status_code == 200

    def test_invite_owner(self, owner_client):
        response = owner_client.post(
            self.url,
            {"username": "partner", "password": "Str0ng-Passw0rd", "role": "owner"},
            format="json",
        )

        assert response.status_code == 201
        assert User.objects.get(username="partner").is_owner()

    def test_duplicate_username(self, owner_client, admin_user):
        response = owner_client.post(
            self.url, {"username": "clerk", "password": "Str0ng-Passw0rd"}, format="json"
        )

        assert response.status_code == 409
        assert response.data == {"error": "Username already exists."}

    def test_invalid_role(self, owner_client):
        response = owner_client.post(
            self.url,
            {"username": "someone", "password": "Str0ng-Passw0rd", "role": "superuser"},
            format="json",
        )

        assert response.status_code == 400
        assert response.data == {"error": "role: Invalid role."}

    def test_weak_password(self, owner_client):
        response = owner_client.post(
            self.url, {"username": "someone", "password": "123"}, format="json"
        )

        assert response.status_code == 400
        assert not User.objects.filter(username="someone").exists()

    def test_missing_fields(self, owner_client):
        response = owner_client.post(self.url, {"username": "someone"}, format="json")

        assert response.status_code == 400

    def test_admin_cannot_invite(self, admin_api_client):
        response = admin_api_client.post(
            self.url, {"username": "someone", "password": "Str0ng-Passw0rd"}, format="json"
        )

        assert response.status_code == 403


@pytest.mark.django_db
class TestChangeRole:
    def test_promote(self, owner_client, admin_user):
        response = owner_client.patch(
            f"/api/users/{admin_user.id}/role", {"role": "owner"}, format="json"
        )

        assert response.status_code == 200
        assert response.data["user"]["role"] == "owner"
        admin_user.refresh_from_db()
        assert admin_user.is_owner()

    def test_own_role(self, owner_client, owner_user):
        response = owner_client.patch(
            f"/api/users/{owner_user.id}/role", {"role": "admin"}, format="json"
        )

        assert response.status_code == 400
        owner_user.refresh_from_db()
        assert owner_user.is_owner()

    def test_invalid_role(self, owner_client, admin_user):
        response = owner_client.patch(
            f"/api/users/{admin_user.id}/role", {"role": "root"}, format="json"
        )

        assert response.status_code == 400
        assert response.data == {"error": "role: Invalid role."}

    def test_unknown_user(self, owner_client):
        response = owner_client.patch(
            f"/api/users/{uuid.uuid4()}/role", {"role": "owner"}, format="json"
        )

        assert response.status_code == 404
