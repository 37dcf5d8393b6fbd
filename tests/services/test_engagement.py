"""Tests for derived engagement columns."""

from __future__ import annotations

import random
from datetime import UTC, datetime, timedelta
from types import SimpleNamespace
from typing import Callable

import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ripple.models import Bookmark, Comment, Notification, Post, PostLike, Profile
from ripple.services import interactions
from ripple.services.engagement import (
    compute_engagement_score,
    record_child_change,
    refresh_post_engagement,
    target_post_id,
    top_stories,
)
from ripple.services.errors import Conflict


def test_compute_engagement_score_formula() -> None:
    created = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
    now = created + timedelta(hours=10)
    assert compute_engagement_score(3, 2, created, now) == pytest.approx(3 + 4 - 1.0)


def test_compute_engagement_score_accepts_naive_timestamps() -> None:
    created = datetime(2026, 1, 1, 12, 0)
    now = datetime(2026, 1, 1, 14, 0, tzinfo=UTC)
    assert compute_engagement_score(0, 0, created, now) == pytest.approx(-0.2)


def test_target_post_id_uses_new_row_on_insert_and_old_row_on_delete() -> None:
    new_row = SimpleNamespace(post_id=7)
    old_row = SimpleNamespace(post_id=9)
    assert target_post_id("insert", new_row=new_row, old_row=old_row) == 7
    assert target_post_id("delete", new_row=new_row, old_row=old_row) == 9


def test_target_post_id_rejects_missing_rows() -> None:
    with pytest.raises(ValueError):
        target_post_id("insert", old_row=SimpleNamespace(post_id=1))
    with pytest.raises(ValueError):
        target_post_id("delete", new_row=SimpleNamespace(post_id=1))
    with pytest.raises(ValueError):
        target_post_id("update", new_row=SimpleNamespace(post_id=1))  # type: ignore[arg-type]


def test_delete_refreshes_the_post_that_lost_the_row(
    db_session: Session, test_post: Post, test_user: Profile
) -> None:
    like = PostLike(post_id=test_post.id, user_id=test_user.id)
    db_session.add(like)
    record_child_change(db_session, "insert", new_row=like)
    assert test_post.like_count == 1

    db_session.delete(like)
    record_child_change(db_session, "delete", old_row=like)
    assert test_post.like_count == 0


def test_refresh_is_idempotent(db_session: Session, test_post: Post, test_user: Profile) -> None:
    now = datetime.now(UTC)
    db_session.add(PostLike(post_id=test_post.id, user_id=test_user.id))
    first = refresh_post_engagement(db_session, test_post.id, now)
    assert first is not None
    snapshot = (first.like_count, first.comment_count, first.engagement_score)
    second = refresh_post_engagement(db_session, test_post.id, now)
    assert second is not None
    assert (second.like_count, second.comment_count, second.engagement_score) == snapshot


def test_refresh_missing_post_returns_none(db_session: Session) -> None:
    assert refresh_post_engagement(db_session, 999_999) is None


def test_like_count_tracks_rows_over_random_sequence(
    db_session: Session,
    test_post: Post,
    make_user: Callable[..., Profile],
) -> None:
    users = [make_user(f"reader{i}@example.com", f"Reader{i}") for i in range(6)]
    rng = random.Random(1234)
    liked: set[int] = set()

    for _ in range(40):
        user = rng.choice(users)
        if user.id in liked:
            interactions.unlike_post(db_session, test_post, user)
            liked.discard(user.id)
        else:
            interactions.like_post(db_session, test_post, user)
            liked.add(user.id)

        db_session.refresh(test_post)
        rows = db_session.scalar(
            select(func.count(PostLike.id)).where(PostLike.post_id == test_post.id)
        )
        assert test_post.like_count == rows == len(liked)


def test_like_then_unlike_restores_score(
    db_session: Session, test_post: Post, other_user: Profile
) -> None:
    db_session.refresh(test_post)
    before = test_post.engagement_score

    interactions.like_post(db_session, test_post, other_user)
    db_session.refresh(test_post)
    assert test_post.like_count == 1

    interactions.unlike_post(db_session, test_post, other_user)
    db_session.refresh(test_post)
    assert test_post.like_count == 0
    # Only time decay separates the two scores; it is negative and tiny here.
    assert test_post.engagement_score == pytest.approx(before, abs=0.01)


def test_comment_insert_and_delete_update_comment_count(
    db_session: Session, test_post: Post, other_user: Profile
) -> None:
    comment = interactions.add_comment(db_session, test_post, other_user, "Beautiful")
    interactions.add_comment(db_session, test_post, other_user, "Agreed", comment.id)
    db_session.refresh(test_post)
    assert test_post.comment_count == 2
    assert test_post.engagement_score > 3.9

    # Deleting the parent takes its reply with it.
    interactions.delete_comment(db_session, comment.id, other_user)
    db_session.refresh(test_post)
    assert test_post.comment_count == 0
    assert db_session.scalar(select(func.count(Comment.id))) == 0


def test_top_stories_orders_by_score(
    db_session: Session,
    make_post: Callable[..., Post],
    test_user: Profile,
    other_user: Profile,
    third_user: Profile,
) -> None:
    quiet = make_post(test_user, content="Quiet story")
    loud = make_post(test_user, content="Loud story")
    interactions.like_post(db_session, loud, other_user)
    interactions.like_post(db_session, loud, third_user)
    interactions.add_comment(db_session, quiet, other_user, "Nice")
    interactions.add_comment(db_session, quiet, third_user, "Lovely")

    ranked = top_stories(db_session, None)
    assert [post.id for post in ranked] == [quiet.id, loud.id]


def test_duplicate_like_is_a_conflict(
    db_session: Session, test_post: Post, test_user: Profile, other_user: Profile
) -> None:
    interactions.like_post(db_session, test_post, other_user)
    with pytest.raises(Conflict):
        interactions.like_post(db_session, test_post, other_user)

    db_session.refresh(test_post)
    assert test_post.like_count == 1
    assert db_session.scalar(
        select(func.count(Notification.id)).where(Notification.user_id == test_user.id)
    ) == 1


def test_duplicate_bookmark_is_a_conflict(
    db_session: Session, test_post: Post, other_user: Profile
) -> None:
    interactions.add_bookmark(db_session, test_post, other_user)
    with pytest.raises(Conflict):
        interactions.add_bookmark(db_session, test_post, other_user)
    assert db_session.scalar(select(func.count(Bookmark.id))) == 1
