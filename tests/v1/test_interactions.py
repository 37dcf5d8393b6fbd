"""Tests for likes, bookmarks and comments."""

from fastapi import status


def test_like_and_unlike(client, test_post, other_auth_token) -> None:
    r = client.post(f"/api/v1/posts/{test_post.id}/like", headers=other_auth_token)
    assert r.status_code == status.HTTP_200_OK
    assert r.json()["like_count"] == 1
    assert r.json()["is_liked"] is True

    r = client.post(f"/api/v1/posts/{test_post.id}/like", headers=other_auth_token)
    assert r.status_code == status.HTTP_409_CONFLICT

    r = client.delete(f"/api/v1/posts/{test_post.id}/like", headers=other_auth_token)
    assert r.status_code == status.HTTP_200_OK
    assert r.json()["like_count"] == 0
    assert r.json()["is_liked"] is False

    r = client.delete(f"/api/v1/posts/{test_post.id}/like", headers=other_auth_token)
    assert r.status_code == status.HTTP_404_NOT_FOUND


def test_cannot_like_invisible_post(client, make_post, test_user, third_auth_token) -> None:
    post = make_post(test_user, privacy_level="private")
    r = client.post(f"/api/v1/posts/{post.id}/like", headers=third_auth_token)
    assert r.status_code == status.HTTP_404_NOT_FOUND


def test_bookmarks(client, test_post, other_auth_token) -> None:
    r = client.post(f"/api/v1/posts/{test_post.id}/bookmark", headers=other_auth_token)
    assert r.status_code == status.HTTP_201_CREATED
    r = client.post(f"/api/v1/posts/{test_post.id}/bookmark", headers=other_auth_token)
    assert r.status_code == status.HTTP_409_CONFLICT

    post = client.get(f"/api/v1/posts/{test_post.id}", headers=other_auth_token).json()
    assert post["is_bookmarked"] is True
    # Bookmarks carry no counters.
    assert post["like_count"] == 0

    r = client.delete(f"/api/v1/posts/{test_post.id}/bookmark", headers=other_auth_token)
    assert r.status_code == status.HTTP_204_NO_CONTENT
    r = client.delete(f"/api/v1/posts/{test_post.id}/bookmark", headers=other_auth_token)
    assert r.status_code == status.HTTP_404_NOT_FOUND


def test_comment_thread(client, test_post, other_auth_token, auth_token) -> None:
    r = client.post(
        f"/api/v1/posts/{test_post.id}/comments",
        json={"content": "  This made my day  "},
        headers=other_auth_token,
    )
    assert r.status_code == status.HTTP_201_CREATED
    parent = r.json()
    assert parent["content"] == "This made my day"

    r = client.post(
        f"/api/v1/posts/{test_post.id}/comments",
        json={"content": "Mine too", "parent_comment_id": parent["id"]},
        headers=auth_token,
    )
    assert r.status_code == status.HTTP_201_CREATED

    comments = client.get(f"/api/v1/posts/{test_post.id}/comments").json()
    assert [c["content"] for c in comments] == ["This made my day", "Mine too"]
    assert comments[1]["parent_comment_id"] == parent["id"]

    post = client.get(f"/api/v1/posts/{test_post.id}").json()
    assert post["comment_count"] == 2


def test_reply_must_target_same_post(client, make_post, test_user, test_post, auth_token) -> None:
    other_post = make_post(test_user, content="A second story")
    parent = client.post(
        f"/api/v1/posts/{test_post.id}/comments", json={"content": "First"}, headers=auth_token
    ).json()
    r = client.post(
        f"/api/v1/posts/{other_post.id}/comments",
        json={"content": "Wrong thread", "parent_comment_id": parent["id"]},
        headers=auth_token,
    )
    assert r.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert r.json()["detail"][0]["loc"] == ["body", "parent_comment_id"]


def test_empty_comment_rejected(client, test_post, auth_token) -> None:
    r = client.post(
        f"/api/v1/posts/{test_post.id}/comments", json={"content": "   "}, headers=auth_token
    )
    assert r.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_edit_and_delete_own_comment(client, test_post, auth_token, other_auth_token) -> None:
    comment = client.post(
        f"/api/v1/posts/{test_post.id}/comments", json={"content": "Typo"}, headers=other_auth_token
    ).json()

    r = client.patch(
        f"/api/v1/comments/{comment['id']}", json={"content": "Fixed"}, headers=auth_token
    )
    assert r.status_code == status.HTTP_403_FORBIDDEN

    r = client.patch(
        f"/api/v1/comments/{comment['id']}", json={"content": "Fixed"}, headers=other_auth_token
    )
    assert r.status_code == status.HTTP_200_OK
    assert r.json()["content"] == "Fixed"

    assert client.delete(f"/api/v1/comments/{comment['id']}", headers=auth_token).status_code == 403
    r = client.delete(f"/api/v1/comments/{comment['id']}", headers=other_auth_token)
    assert r.status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"/api/v1/posts/{test_post.id}").json()["comment_count"] == 0
