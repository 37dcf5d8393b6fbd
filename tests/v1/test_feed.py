"""Tests for feed endpoints."""

from fastapi import status


def test_public_feed_newest_first_with_cursor(client, make_post, test_user) -> None:
    posts = [make_post(test_user, content=f"Story {i}") for i in range(5)]
    ids = [p.id for p in reversed(posts)]

    r = client.get("/api/v1/feed/public", params={"limit": 2})
    assert r.status_code == status.HTTP_200_OK
    page = [p["id"] for p in r.json()]
    assert page == ids[:2]

    r = client.get("/api/v1/feed/public", params={"limit": 2, "before": page[-1]})
    assert [p["id"] for p in r.json()] == ids[2:4]


def test_public_feed_excludes_restricted_posts(
    client, make_post, test_user, other_user, auth_token, other_auth_token
) -> None:
    public = make_post(test_user, content="Public")
    make_post(test_user, content="Private", privacy_level="private")
    overridden = make_post(test_user, content="Restricted by recipient", recipient_id=other_user.id)
    r = client.put(
        f"/api/v1/posts/{overridden.id}/visibility",
        json={"recipient_visibility_override": "recipient_only"},
        headers=other_auth_token,
    )
    assert r.status_code == status.HTTP_200_OK

    anonymous_ids = [p["id"] for p in client.get("/api/v1/feed/public").json()]
    assert anonymous_ids == [public.id]

    # The author still sees the restricted story; private stories never enter this feed.
    author_ids = [p["id"] for p in client.get("/api/v1/feed/public", headers=auth_token).json()]
    assert author_ids == [overridden.id, public.id]


def test_tagged_feed(client, make_post, test_user, other_user, other_auth_token) -> None:
    tagged = make_post(test_user, recipient_id=other_user.id)
    make_post(test_user, content="Not about Bob")
    r = client.get("/api/v1/feed/tagged", headers=other_auth_token)
    assert [p["id"] for p in r.json()] == [tagged.id]


def test_top_feed(client, make_post, test_user, other_auth_token, third_auth_token) -> None:
    low = make_post(test_user, content="Low")
    high = make_post(test_user, content="High")
    for headers in (other_auth_token, third_auth_token):
        client.post(f"/api/v1/posts/{high.id}/like", headers=headers)

    r = client.get("/api/v1/feed/top")
    assert [p["id"] for p in r.json()][:2] == [high.id, low.id]


def test_saved_feed(client, make_post, test_user, other_auth_token) -> None:
    first = make_post(test_user, content="First")
    second = make_post(test_user, content="Second")
    client.post(f"/api/v1/posts/{second.id}/bookmark", headers=other_auth_token)
    client.post(f"/api/v1/posts/{first.id}/bookmark", headers=other_auth_token)

    r = client.get("/api/v1/feed/saved", headers=other_auth_token)
    data = r.json()
    assert [p["id"] for p in data] == [first.id, second.id]
    assert all(p["is_bookmarked"] for p in data)


def test_feed_marks_liked_posts(client, test_post, other_auth_token) -> None:
    client.post(f"/api/v1/posts/{test_post.id}/like", headers=other_auth_token)
    [post] = client.get("/api/v1/feed/public", headers=other_auth_token).json()
    assert post["is_liked"] is True
    [anon] = client.get("/api/v1/feed/public").json()
    assert anon["is_liked"] is False


def test_blocked_author_hidden_from_feeds(
    client, test_post, test_user, other_auth_token
) -> None:
    client.post(f"/api/v1/blocks/{test_user.id}", headers=other_auth_token)
    assert client.get("/api/v1/feed/public", headers=other_auth_token).json() == []
    assert client.get("/api/v1/feed/top", headers=other_auth_token).json() == []
    # Everyone else still sees the story.
    assert len(client.get("/api/v1/feed/public").json()) == 1
