# src/ripple/models/matching.py
"""Models tracking story recipients who have not registered yet."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from ripple.db.session import Base
from ripple.db.time import utcnow


class PendingRecipientMatch(Base):
    """Free-text recipient awaiting reconciliation with an account.

    Once ``matched`` is True, ``matched_user_id`` is the account that
    reconciled the row and is never reassigned.
    """

    __tablename__ = "pending_recipient_matches"
    __table_args__ = (
        Index("idx_pending_matches_matched", "matched", "recipient_email"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    )
    recipient_name: Mapped[str] = mapped_column(Text, nullable=False)
    recipient_email: Mapped[str | None] = mapped_column(Text, nullable=True)
    matched: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    matched_user_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("profiles.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
