"""Tests for signup and login endpoints."""

from fastapi import status

TEST_PASSWORD = "correct horse battery"


def test_signup_returns_token_and_logs_in(client) -> None:
    r = client.post(
        "/api/v1/auth/signup",
        json={
            "email": "New.User@Example.com",
            "password": "long enough password",
            "first_name": "New",
            "last_name": "User",
        },
    )
    assert r.status_code == status.HTTP_201_CREATED
    body = r.json()
    assert body["token_type"] == "bearer"
    assert body["matched_stories"] == 0

    me = client.get(
        "/api/v1/profiles/me", headers={"Authorization": f"Bearer {body['access_token']}"}
    )
    assert me.status_code == status.HTTP_200_OK
    assert me.json()["email"] == "new.user@example.com"

    r = client.post(
        "/api/v1/auth/login",
        json={"email": "new.user@example.com", "password": "long enough password"},
    )
    assert r.status_code == status.HTTP_200_OK
    assert r.json()["access_token"]


def test_signup_rejects_duplicate_email(client, test_user) -> None:
    r = client.post(
        "/api/v1/auth/signup",
        json={"email": "ALICE@example.com", "password": "another password", "first_name": "A"},
    )
    assert r.status_code == status.HTTP_409_CONFLICT


def test_signup_validates_fields(client) -> None:
    r = client.post(
        "/api/v1/auth/signup",
        json={"email": "not-an-email", "password": "short", "first_name": "  "},
    )
    assert r.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    fields = {tuple(err["loc"])[-1] for err in r.json()["detail"]}
    assert {"email", "password", "first_name"} <= fields


def test_login_with_wrong_password(client, test_user) -> None:
    r = client.post(
        "/api/v1/auth/login",
        json={"email": test_user.email, "password": "wrong password"},
    )
    assert r.status_code == status.HTTP_401_UNAUTHORIZED


def test_login_with_fixture_password(client, test_user) -> None:
    r = client.post(
        "/api/v1/auth/login",
        json={"email": test_user.email, "password": TEST_PASSWORD},
    )
    assert r.status_code == status.HTTP_200_OK


def test_invalid_token_rejected(client) -> None:
    r = client.get("/api/v1/profiles/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == status.HTTP_401_UNAUTHORIZED


def test_missing_token_rejected(client) -> None:
    r = client.get("/api/v1/profiles/me")
    assert r.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)
