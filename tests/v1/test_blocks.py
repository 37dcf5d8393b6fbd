"""Tests for user block endpoints."""

from fastapi import status


def test_block_list_unblock(client, other_user, auth_token) -> None:
    r = client.post(f"/api/v1/blocks/{other_user.id}", headers=auth_token)
    assert r.status_code == status.HTTP_201_CREATED
    assert r.json()["blocked_id"] == other_user.id

    assert client.post(f"/api/v1/blocks/{other_user.id}", headers=auth_token).status_code == 409
    assert [b["blocked_id"] for b in client.get("/api/v1/blocks/", headers=auth_token).json()] == [
        other_user.id
    ]

    r = client.delete(f"/api/v1/blocks/{other_user.id}", headers=auth_token)
    assert r.status_code == status.HTTP_204_NO_CONTENT
    assert client.get("/api/v1/blocks/", headers=auth_token).json() == []
    assert client.delete(f"/api/v1/blocks/{other_user.id}", headers=auth_token).status_code == 404


def test_cannot_block_self(client, test_user, auth_token) -> None:
    r = client.post(f"/api/v1/blocks/{test_user.id}", headers=auth_token)
    assert r.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_cannot_block_unknown_user(client, auth_token) -> None:
    assert client.post("/api/v1/blocks/4040", headers=auth_token).status_code == 404


def test_block_is_one_directional(
    client, test_post, auth_token, other_user, other_auth_token
) -> None:
    client.post(f"/api/v1/blocks/{other_user.id}", headers=auth_token)
    # The blocked user still sees the blocker's stories.
    assert len(client.get("/api/v1/feed/public", headers=other_auth_token).json()) == 1
