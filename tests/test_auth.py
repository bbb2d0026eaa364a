"""
Unit and integration tests for admin authentication
"""

from datetime import timedelta
from fastapi import status

from storefront.core.auth import (
    authenticate_admin,
    create_access_token,
    decode_access_token,
    hash_password,
    pwd_context,
    verify_token,
)
from storefront.core.config import get_settings

settings = get_settings()
ADMIN_EMAIL = settings.ADMIN_EMAIL
ADMIN_PASSWORD = "test-password"


def test_create_access_token():
    """Test JWT token creation"""
    token = create_access_token(ADMIN_EMAIL, expires_delta=timedelta(hours=1))

    assert isinstance(token, str)
    payload = decode_access_token(token)
    assert payload["sub"] == ADMIN_EMAIL
    assert payload["role"] == "admin"
    assert "exp" in payload


def test_verify_token_returns_email():
    token = create_access_token(ADMIN_EMAIL)

    assert verify_token(token) == ADMIN_EMAIL


def test_expired_token_rejected():
    token = create_access_token(ADMIN_EMAIL, expires_delta=timedelta(seconds=-10))

    assert decode_access_token(token) is None
    assert verify_token(token) is None


def test_invalid_token_rejected():
    assert verify_token("not-a-jwt") is None


def test_authenticate_admin():
    assert authenticate_admin(ADMIN_EMAIL, ADMIN_PASSWORD)
    assert authenticate_admin(f"  {ADMIN_EMAIL.upper()} ", ADMIN_PASSWORD)
    assert not authenticate_admin(ADMIN_EMAIL, "wrong")
    assert not authenticate_admin("someone@example.com", ADMIN_PASSWORD)


def test_hash_password_verifies():
    hashed = hash_password("s3cret")

    assert hashed != "s3cret"
    assert pwd_context.verify("s3cret", hashed)
    assert not pwd_context.verify("other", hashed)


def test_authenticate_admin_without_password_hash(monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", None)

    assert not authenticate_admin(ADMIN_EMAIL, ADMIN_PASSWORD)


def test_login_returns_token(anonymous_client):
    response = anonymous_client.post("/api/auth/login", json={
        "email": ADMIN_EMAIL,
        "password": ADMIN_PASSWORD,
    })

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["token_type"] == "bearer"
    assert verify_token(data["access_token"]) == ADMIN_EMAIL


def test_login_wrong_password(anonymous_client):
    response = anonymous_client.post("/api/auth/login", json={
        "email": ADMIN_EMAIL,
        "password": "nope",
    })

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"error": "Incorrect email or password"}


def test_login_disabled_without_password_hash(anonymous_client, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", None)

    response = anonymous_client.post("/api/auth/login", json={
        "email": ADMIN_EMAIL,
        "password": ADMIN_PASSWORD,
    })

    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_login_invalid_email(anonymous_client):
    response = anonymous_client.post("/api/auth/login", json={
        "email": "not-an-email",
        "password": ADMIN_PASSWORD,
    })

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    data = response.json()
    assert data["error"] == "Validation failed"
    assert data["details"][0]["field"] == "email"


def test_mutation_requires_token(anonymous_client):
    response = anonymous_client.post("/api/faqs", json={"question": "Q?", "answer": "A"})

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"error": "Could not validate credentials"}
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_mutation_with_bad_token(anonymous_client):
    response = anonymous_client.delete(
        "/api/faqs/00000000-0000-0000-0000-000000000000",
        headers={"Authorization": "Bearer not-a-jwt"},
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_mutation_with_login_token(anonymous_client):
    token = anonymous_client.post("/api/auth/login", json={
        "email": ADMIN_EMAIL,
        "password": ADMIN_PASSWORD,
    }).json()["access_token"]

    response = anonymous_client.post(
        "/api/categories",
        json={"name": "Coffee"},
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == status.HTTP_201_CREATED


def test_reads_are_public(anonymous_client):
    assert anonymous_client.get("/api/categories").status_code == status.HTTP_200_OK
    assert anonymous_client.get("/api/faqs").status_code == status.HTTP_200_OK
