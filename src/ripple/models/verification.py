# src/ripple/models/verification.py
"""Identity verification requests reviewed by staff."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from ripple.db.session import Base
from ripple.db.time import utcnow
from ripple.models.enums import DocumentType, VerificationRequestStatus, db_enum


class VerificationRequest(Base):
    """A user's submission of an identity document for review."""

    __tablename__ = "verification_requests"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    # Documents live in external storage; only the reference is kept here.
    document_url: Mapped[str] = mapped_column(Text, nullable=False)
    document_type: Mapped[DocumentType] = mapped_column(
        db_enum(DocumentType, "document_type"), nullable=False
    )
    status: Mapped[VerificationRequestStatus] = mapped_column(
        db_enum(VerificationRequestStatus, "verification_request_status"),
        nullable=False,
        default=VerificationRequestStatus.PENDING,
    )
    rejection_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Set exactly once, when the request leaves the pending state.
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
