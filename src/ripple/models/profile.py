# src/ripple/models/profile.py
"""SQLAlchemy models for registered accounts."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ripple.db.session import Base
from ripple.db.time import utcnow
from ripple.models.enums import VerificationStatus, db_enum

DEFAULT_NOTIFICATION_PREFERENCES: dict[str, bool] = {
    "email_on_tag": True,
    "email_on_like": False,
    "email_on_comment": True,
}


def _default_preferences() -> dict[str, bool]:
    return dict(DEFAULT_NOTIFICATION_PREFERENCES)


class Profile(Base):
    """A registered account and its public profile.

    Verification fields are only ever written by the reviewer workflow.
    """

    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    display_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    avatar_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    verification_status: Mapped[VerificationStatus] = mapped_column(
        db_enum(VerificationStatus, "verification_status"),
        nullable=False,
        default=VerificationStatus.PENDING,
    )
    verification_submitted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    verified_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    interests: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    notification_preferences: Mapped[dict[str, Any]] = mapped_column(
        JSON, nullable=False, default=_default_preferences
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    @property
    def full_name(self) -> str:
        """Return ``first last`` with the last name omitted when unknown."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    @property
    def public_name(self) -> str:
        """Return the name shown to other users."""
        return self.display_name or self.full_name
