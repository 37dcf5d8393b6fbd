"""Derived engagement columns and the top-stories ranking.

``like_count``, ``comment_count`` and ``engagement_score`` on a post are
recomputed from its child rows whenever a like or comment is inserted or
deleted, inside the same transaction as that mutation. Recomputation counts
rows instead of applying deltas, so running it twice is harmless.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Final, Literal, Protocol

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ripple.core.settings import settings
from ripple.db.time import as_utc, utcnow
from ripple.models import Comment, Post, PostLike
from ripple.repositories.post_repo import PostRepository

logger = logging.getLogger(__name__)

LIKE_WEIGHT: Final[float] = 1.0
COMMENT_WEIGHT: Final[float] = 2.0
DECAY_PER_HOUR: Final[float] = -0.1

ChildOperation = Literal["insert", "delete"]


class PostChild(Protocol):
    """Any child row that references a post (a like or a comment)."""

    post_id: int


def compute_engagement_score(
    likes: int,
    comments: int,
    created_at: datetime,
    now: datetime | None = None,
) -> float:
    """Return ``likes * 1.0 + comments * 2.0 + hours_since_creation * -0.1``."""
    current = as_utc(now or utcnow())
    hours = (current - as_utc(created_at)).total_seconds() / 3600.0
    return likes * LIKE_WEIGHT + comments * COMMENT_WEIGHT + hours * DECAY_PER_HOUR


def target_post_id(
    operation: ChildOperation,
    new_row: PostChild | None = None,
    old_row: PostChild | None = None,
) -> int:
    """Pick the affected post id for a child-row mutation.

    Inserts carry the post reference on the new row, deletes on the old row.
    """
    if operation == "insert":
        if new_row is None:
            raise ValueError("insert requires the new row")
        return new_row.post_id
    if operation == "delete":
        if old_row is None:
            raise ValueError("delete requires the old row")
        return old_row.post_id
    raise ValueError(f"Unsupported operation: {operation}")


def refresh_post_engagement(
    db: Session,
    post_id: int,
    now: datetime | None = None,
) -> Post | None:
    """Recount likes and comments for ``post_id`` and rewrite its derived columns."""
    # Pending inserts/deletes must be visible to the counts below.
    db.flush()

    post = db.get(Post, post_id)
    if post is None:
        return None

    like_count = db.scalar(
        select(func.count(PostLike.id)).where(PostLike.post_id == post_id)
    ) or 0
    comment_count = db.scalar(
        select(func.count(Comment.id)).where(Comment.post_id == post_id)
    ) or 0

    post.like_count = int(like_count)
    post.comment_count = int(comment_count)
    post.engagement_score = compute_engagement_score(
        post.like_count, post.comment_count, post.created_at, now
    )
    db.flush()
    logger.debug(
        "Refreshed engagement for post %s: likes=%d comments=%d score=%.3f",
        post_id,
        post.like_count,
        post.comment_count,
        post.engagement_score,
    )
    return post


def record_child_change(
    db: Session,
    operation: ChildOperation,
    *,
    new_row: PostChild | None = None,
    old_row: PostChild | None = None,
    now: datetime | None = None,
) -> Post | None:
    """Refresh the post affected by a like/comment insert or delete."""
    return refresh_post_engagement(db, target_post_id(operation, new_row, old_row), now)


def top_stories(db: Session, viewer_id: int | None, limit: int | None = None) -> list[Post]:
    """Return public posts the viewer can see, ordered by engagement score."""
    return PostRepository(db).list_top(viewer_id, limit=limit or settings.top_stories_limit)
