# src/ripple/models/__init__.py
"""SQLAlchemy models for the Ripple application."""

from .block import UserBlock
from .engagement import Bookmark, Comment, PostLike
from .enums import (
    DocumentType,
    NotificationType,
    PosterAnonymity,
    PrivacyLevel,
    RecipientType,
    VerificationRequestStatus,
    VerificationStatus,
)
from .matching import PendingRecipientMatch
from .notification import Notification
from .post import Post
from .profile import Profile
from .verification import VerificationRequest

__all__ = [
    "UserBlock",
    "Bookmark", "Comment", "PostLike",
    "DocumentType", "NotificationType", "PosterAnonymity", "PrivacyLevel",
    "RecipientType", "VerificationRequestStatus", "VerificationStatus",
    "PendingRecipientMatch",
    "Notification",
    "Post",
    "Profile",
    "VerificationRequest",
]
