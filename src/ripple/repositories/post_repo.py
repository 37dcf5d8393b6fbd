"""Data access helpers for working with posts."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from ripple.models import Bookmark, Post, PostLike, PrivacyLevel, UserBlock
from ripple.services.visibility import visible_to

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for post entities.

    Every read goes through :func:`visible_to`, so callers only ever see rows
    the viewer is allowed to read.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, post_id: int) -> Post | None:
        """Return a post by identifier, ignoring visibility."""
        return self.session.get(Post, post_id)

    def get_visible(self, post_id: int, viewer_id: int | None) -> Post | None:
        """Return a post if it exists and the viewer may read it."""
        stmt = select(Post).where(Post.id == post_id, visible_to(viewer_id))
        return self.session.scalars(stmt).first()

    def _visible_stmt(self, viewer_id: int | None) -> Select[tuple[Post]]:
        stmt = select(Post).where(visible_to(viewer_id))
        if viewer_id is not None:
            blocked = select(UserBlock.blocked_id).where(UserBlock.blocker_id == viewer_id)
            stmt = stmt.where(
                (Post.author_id.is_(None)) | (Post.author_id.not_in(blocked))
            )
        return stmt

    def list_public(self, viewer_id: int | None, *, limit: int, before: int | None = None) -> list[Post]:
        """Return public posts, newest first."""
        stmt = self._visible_stmt(viewer_id).where(Post.privacy_level == PrivacyLevel.PUBLIC)
        if before is not None:
            stmt = stmt.where(Post.id < before)
        stmt = stmt.order_by(Post.id.desc()).limit(limit)
        return list(self.session.scalars(stmt))

    def list_tagged(self, viewer_id: int, *, limit: int, before: int | None = None) -> list[Post]:
        """Return posts in which the viewer is the registered recipient, newest first."""
        stmt = self._visible_stmt(viewer_id).where(Post.recipient_id == viewer_id)
        if before is not None:
            stmt = stmt.where(Post.id < before)
        stmt = stmt.order_by(Post.id.desc()).limit(limit)
        return list(self.session.scalars(stmt))

    def list_top(self, viewer_id: int | None, *, limit: int) -> list[Post]:
        """Return public posts ranked by engagement score."""
        stmt = (
            self._visible_stmt(viewer_id)
            .where(Post.privacy_level == PrivacyLevel.PUBLIC)
            .order_by(Post.engagement_score.desc(), Post.id.desc())
            .limit(limit)
        )
        return list(self.session.scalars(stmt))

    def list_saved(self, viewer_id: int, *, limit: int) -> list[Post]:
        """Return bookmarked posts in the order they were saved, newest first."""
        stmt = (
            self._visible_stmt(viewer_id)
            .join(Bookmark, Bookmark.post_id == Post.id)
            .where(Bookmark.user_id == viewer_id)
        )
        stmt = stmt.order_by(Bookmark.id.desc()).limit(limit)
        return list(self.session.scalars(stmt))

    def liked_post_ids(self, viewer_id: int, post_ids: list[int]) -> set[int]:
        """Return which of ``post_ids`` the viewer has liked."""
        if not post_ids:
            return set()
        stmt = select(PostLike.post_id).where(
            PostLike.user_id == viewer_id, PostLike.post_id.in_(post_ids)
        )
        return set(self.session.scalars(stmt))

    def bookmarked_post_ids(self, viewer_id: int, post_ids: list[int]) -> set[int]:
        """Return which of ``post_ids`` the viewer has bookmarked."""
        if not post_ids:
            return set()
        stmt = select(Bookmark.post_id).where(
            Bookmark.user_id == viewer_id, Bookmark.post_id.in_(post_ids)
        )
        return set(self.session.scalars(stmt))
