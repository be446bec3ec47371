"""Integration tests for authentication endpoints."""
import pytest

from app.core import config


@pytest.fixture
def known_credentials(monkeypatch):
    monkeypatch.setattr(
        config, "settings", config.Settings(ADMIN_USERNAME="admin", ADMIN_PASSWORD="testpass123")
    )


@pytest.mark.integration
class TestAdminLogin:

    def test_login_success_sets_cookie(self, client, known_credentials):
        response = client.post(
            "/api/v1/auth/admin/login",
            json={"username": "admin", "password": "testpass123"},
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Logged in successfully"}
        assert "admin_token" in response.cookies

        session = client.get("/api/v1/auth/admin/session")
        assert session.json() == {"is_admin": True}

    def test_login_wrong_password(self, client, known_credentials):
        response = client.post(
            "/api/v1/auth/admin/login",
            json={"username": "admin", "password": "wrong"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"

    def test_login_wrong_username(self, client, known_credentials):
        response = client.post(
            "/api/v1/auth/admin/login",
            json={"username": "root", "password": "testpass123"},
        )
        assert response.status_code == 401

    def test_login_missing_fields(self, client):
        response = client.post("/api/v1/auth/admin/login", json={"password": "x"})
        assert response.status_code == 422

    def test_logout(self, admin_client):
        response = admin_client.post("/api/v1/auth/admin/logout")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Logged out successfully"}

    def test_session_anonymous(self, client):
        assert client.get("/api/v1/auth/admin/session").json() == {"is_admin": False}

    def test_session_with_forged_cookie(self, client):
        client.cookies.set("admin_token", "forged")
        assert client.get("/api/v1/auth/admin/session").json() == {"is_admin": False}
