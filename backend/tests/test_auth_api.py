"""Route tests for login, current user and categories."""

from conftest import TEST_PASSWORD
from app.services.auth_service import create_access_token, verify_token


def test_login_returns_usable_token(client):
    response = client.post("/api/v1/auth/login", json={"name": "eve", "password": TEST_PASSWORD})

    assert response.status_code == 200
    token = response.json()["access_token"]
    assert response.json()["token_type"] == "bearer"

    me = client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json() == {"id": 5, "name": "eve"}


def test_login_wrong_password(client):
    response = client.post("/api/v1/auth/login", json={"name": "eve", "password": "nope"})
    assert response.status_code == 401
    assert response.json() == {"error": "Incorrect name or password"}


def test_invalid_token(client):
    response = client.get("/api/v1/users/me", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid or expired token"}


def test_token_for_unknown_user(client):
    headers = {"Authorization": f"Bearer {create_access_token(404)}"}
    response = client.get("/api/v1/users/me", headers=headers)
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_verify_token_round_trip():
    payload = verify_token(create_access_token(7))
    assert payload.sub == "7"
    assert verify_token(create_access_token(7), expected_type="refresh") is None


def test_categories(client):
    response = client.get("/api/v1/categories")
    assert response.status_code == 200
    assert response.json() == [
        {"id": 1, "label": "Puns"},
        {"id": 2, "label": "Programming"},
    ]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
