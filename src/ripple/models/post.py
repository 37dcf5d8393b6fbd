# src/ripple/models/post.py
"""SQLAlchemy models for stories and related attributes."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import JSON, DateTime, Float, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ripple.db.session import Base
from ripple.db.time import utcnow
from ripple.models.enums import PosterAnonymity, PrivacyLevel, RecipientType, db_enum

if TYPE_CHECKING:
    from ripple.models.engagement import Bookmark, Comment, PostLike
    from ripple.models.matching import PendingRecipientMatch
    from ripple.models.notification import Notification


class Post(Base):
    """A story about someone who had a positive impact on the author.

    ``like_count``, ``comment_count`` and ``engagement_score`` are derived from
    child rows and are only written by :mod:`ripple.services.engagement`.
    """

    __tablename__ = "posts"
    __table_args__ = (
        Index("idx_posts_author_id", "author_id"),
        Index("idx_posts_recipient_id", "recipient_id"),
        Index("idx_posts_created_at", "created_at"),
        Index("idx_posts_engagement_score", "engagement_score"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Null once the author account is deleted; the first name snapshot keeps attribution.
    author_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("profiles.id", ondelete="SET NULL"),
        nullable=True,
    )
    author_first_name: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    recipient_type: Mapped[RecipientType] = mapped_column(
        db_enum(RecipientType, "recipient_type"), nullable=False
    )
    recipient_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("profiles.id", ondelete="SET NULL"),
        nullable=True,
    )
    recipient_name: Mapped[str] = mapped_column(Text, nullable=False)

    # Owned by the author.
    privacy_level: Mapped[PrivacyLevel] = mapped_column(
        db_enum(PrivacyLevel, "privacy_level"),
        nullable=False,
        default=PrivacyLevel.PUBLIC,
    )
    # Owned by the recipient; supersedes privacy_level when set.
    recipient_visibility_override: Mapped[PrivacyLevel | None] = mapped_column(
        db_enum(PrivacyLevel, "privacy_level"),
        nullable=True,
    )
    poster_anonymity: Mapped[PosterAnonymity] = mapped_column(
        db_enum(PosterAnonymity, "poster_anonymity"),
        nullable=False,
        default=PosterAnonymity.FULL_PROFILE,
    )
    interests: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    like_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    comment_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    engagement_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    likes: Mapped[list[PostLike]] = relationship(
        "PostLike", cascade="all, delete-orphan"
    )
    comments: Mapped[list[Comment]] = relationship(
        "Comment", cascade="all, delete-orphan"
    )
    bookmarks: Mapped[list[Bookmark]] = relationship(
        "Bookmark", cascade="all, delete-orphan"
    )
    notifications: Mapped[list[Notification]] = relationship(
        "Notification", cascade="all, delete-orphan"
    )
    pending_matches: Mapped[list[PendingRecipientMatch]] = relationship(
        "PendingRecipientMatch", cascade="all, delete-orphan"
    )
