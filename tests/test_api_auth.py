"""
Tests for glbcatalog/auth/routes.py and the auth middleware.
"""
from conftest import login


class TestLogin:
    def test_admin_login(self, client):
        response = login(client, "admin", "admin123")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Welcome, admin!"
        assert data["role"] == "Admin"
        assert data["dashboard"] == "admin"

    def test_user_login(self, client):
        data = login(client, "user", "user123").json()

        assert data["role"] == "User"
        assert data["dashboard"] == "user"

    def test_credentials_are_trimmed(self, client):
        assert login(client, "  admin ", " admin123 ").status_code == 200

    def test_wrong_password(self, client):
        response = login(client, "admin", "wrong")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Invalid username or password"
        assert client.get("/auth/session").json()["logged_in"] is False

    def test_unknown_user(self, client):
        response = login(client, "nobody", "x")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"

    def test_empty_username(self, client):
        response = login(client, "   ", "admin123")

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Please enter username"

    def test_empty_password(self, client):
        response = login(client, "admin", "")

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Please enter password"


class TestSession:
    def test_session_after_login(self, admin_client):
        data = admin_client.get("/auth/session").json()

        assert data["logged_in"] is True
        assert data["username"] == "admin"
        assert data["role"] == "Admin"
        assert isinstance(data["user_id"], int)

    def test_logout_clears_session(self, admin_client):
        assert admin_client.post("/auth/logout").json() == {"ok": True}

        data = admin_client.get("/auth/session").json()
        assert data == {"logged_in": False, "user_id": None, "username": None, "role": None}

    def test_session_persists_across_app_restart(self, settings, client):
        from fastapi.testclient import TestClient
        from glbcatalog.main import create_app

        login(client, "user", "user123")

        with TestClient(create_app(settings)) as restarted:
            assert restarted.get("/auth/session").json()["username"] == "user"


class TestAuthMiddleware:
    def test_api_requires_session(self, client):
        response = client.get("/models")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "NOT_AUTHENTICATED"

    def test_ui_redirects_to_login(self, client):
        response = client.get("/ui/models", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"] == "/ui"

    def test_login_page_public(self, client):
        response = client.get("/ui")

        assert response.status_code == 200
        assert "Login" in response.text

    def test_login_page_redirects_when_logged_in(self, user_client):
        response = user_client.get("/ui", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/ui/models"

    def test_root_public(self, client):
        assert client.get("/").status_code == 200
