"""Registration, login and session checks."""

from datetime import timedelta

import pytest

from app.core.auth import create_access_token, decode_token, hash_password, verify_password
from tests.conftest import login, register


def test_register_returns_user_without_hash(client):
    response = register(client, "alice@x.com")

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "alice@x.com"
    assert body["id"]
    assert "createdAt" in body
    assert "password" not in body
    assert "passwordHash" not in body
    assert "password_hash" not in body


def test_register_duplicate_email_conflicts(client):
    assert register(client, "alice@x.com").status_code == 201

    response = register(client, "alice@x.com", "another-password")

    assert response.status_code == 409
    assert response.json() == {"error": "User with this email already exists"}


@pytest.mark.parametrize("payload", [
    {"email": "alice@x.com"},
    {"password": "pw123456"},
    {"email": "alice@x.com", "password": ""},
    {"email": "not-an-email", "password": "pw123456"},
    {},
])
def test_register_rejects_bad_input(client, payload):
    response = client.post("/api/register", json=payload)

    assert response.status_code == 400
    assert "error" in response.json()


def test_login_issues_token_with_user_id(client):
    user_id = register(client, "alice@x.com").json()["id"]

    response = login(client, "alice@x.com")

    assert response.status_code == 200
    body = response.json()
    assert body["tokenType"] == "bearer"
    assert body["userId"] == user_id
    assert decode_token(body["accessToken"])["sub"] == user_id


@pytest.mark.parametrize("password", ["wrong-password", "", "PW123456", "pw1234567"])
def test_login_wrong_password_fails(client, password):
    register(client, "alice@x.com")

    response = login(client, "alice@x.com", password)

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid email or password"}
    assert "accessToken" not in response.json()


def test_login_unknown_email_fails(client):
    response = login(client, "nobody@x.com")

    assert response.status_code == 401


def test_me_returns_current_user(client, alice):
    response = client.get("/api/auth/me", headers=alice)

    assert response.status_code == 200
    assert response.json()["email"] == "alice@x.com"


def test_me_without_token_is_unauthorized(client):
    response = client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


@pytest.mark.parametrize("token", [
    "garbage",
    create_access_token("some-user", expires_delta=timedelta(minutes=-5)),
    create_access_token("user-that-does-not-exist"),
])
def test_me_with_bad_token_is_unauthorized(client, token):
    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_password_hash_is_one_way():
    hashed = hash_password("pw123456")

    assert hashed != "pw123456"
    assert verify_password("pw123456", hashed)
    assert not verify_password("pw12345", hashed)
    assert not verify_password("", hashed)


def test_login_with_mixed_case_registration_email(client):
    assert register(client, "Alice@X.COM").status_code == 201

    response = login(client, "Alice@X.COM")

    assert response.status_code == 200
    assert response.json()["accessToken"]


def test_login_with_malformed_email_is_unauthorized(client):
    response = login(client, "not-an-email")

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid email or password"}
