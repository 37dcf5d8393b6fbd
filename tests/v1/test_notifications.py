"""Tests for notification endpoints."""

from fastapi import status


def test_inbox_and_unread_count(client, tagged_post, other_auth_token) -> None:
    r = client.get("/api/v1/notifications/unread-count", headers=other_auth_token)
    assert r.status_code == status.HTTP_200_OK
    assert r.json() == {"unread": 1, "poll_interval_seconds": 30}

    [note] = client.get("/api/v1/notifications/", headers=other_auth_token).json()
    assert note["type"] == "tagged"
    assert note["post_id"] == tagged_post.id

    r = client.post(f"/api/v1/notifications/{note['id']}/read", headers=other_auth_token)
    assert r.status_code == status.HTTP_200_OK
    assert r.json()["read"] is True
    assert client.get(
        "/api/v1/notifications/unread-count", headers=other_auth_token
    ).json()["unread"] == 0


def test_cannot_read_someone_elses_notification(
    client, tagged_post, auth_token, other_auth_token
) -> None:
    [note] = client.get("/api/v1/notifications/", headers=other_auth_token).json()
    r = client.post(f"/api/v1/notifications/{note['id']}/read", headers=auth_token)
    assert r.status_code == status.HTTP_404_NOT_FOUND
    assert client.get("/api/v1/notifications/", headers=auth_token).json() == []


def test_read_all(client, test_post, auth_token, other_auth_token, third_auth_token) -> None:
    client.post(f"/api/v1/posts/{test_post.id}/like", headers=other_auth_token)
    client.post(f"/api/v1/posts/{test_post.id}/like", headers=third_auth_token)

    r = client.post("/api/v1/notifications/read-all", headers=auth_token)
    assert r.json() == {"updated": 2}
    r = client.post("/api/v1/notifications/read-all", headers=auth_token)
    assert r.json() == {"updated": 0}


def test_forged_notification_rejected(
    client, test_post, other_user, third_auth_token, other_auth_token
) -> None:
    r = client.post(
        "/api/v1/notifications/",
        json={
            "user_id": other_user.id,
            "type": "tagged",
            "post_id": test_post.id,
            "message": "You won a prize",
        },
        headers=third_auth_token,
    )
    assert r.status_code == status.HTTP_403_FORBIDDEN
    assert client.get("/api/v1/notifications/", headers=other_auth_token).json() == []


def test_author_may_notify_about_own_post(client, test_post, other_user, auth_token) -> None:
    r = client.post(
        "/api/v1/notifications/",
        json={
            "user_id": other_user.id,
            "type": "tagged",
            "post_id": test_post.id,
            "message": "I wrote about you",
        },
        headers=auth_token,
    )
    assert r.status_code == status.HTTP_201_CREATED
    assert r.json()["user_id"] == other_user.id


def test_notification_for_unknown_account_rejected(client, test_post, auth_token) -> None:
    r = client.post(
        "/api/v1/notifications/",
        json={
            "user_id": 987654,
            "type": "tagged",
            "post_id": test_post.id,
            "message": "Hello there",
        },
        headers=auth_token,
    )
    assert r.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert r.json()["detail"][0]["loc"] == ["body", "user_id"]


def test_system_notification_types_cannot_be_sent_by_users(
    client, tagged_post, auth_token, other_auth_token
) -> None:
    before = client.get("/api/v1/notifications/", headers=other_auth_token).json()
    for kind in ("like", "match_found", "verification_complete"):
        r = client.post(
            "/api/v1/notifications/",
            json={
                "user_id": tagged_post.recipient_id,
                "type": kind,
                "post_id": tagged_post.id,
                "message": "Your account is verified",
            },
            headers=auth_token,
        )
        assert r.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert r.json()["detail"][0]["loc"] == ["body", "type"]
    assert client.get("/api/v1/notifications/", headers=other_auth_token).json() == before
