# src/ripple/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .block import BlockResponse
from .comment import CommentCreate, CommentResponse, CommentUpdate
from .common import CountResponse, StatusResponse
from .matching import PendingMatchResponse
from .notification import NotificationCreate, NotificationResponse, UnreadCountResponse
from .post import (
    AuthorSummary,
    PostCreate,
    PostResponse,
    PostUpdate,
    VisibilityOverrideUpdate,
)
from .profile import (
    LoginRequest,
    LoginResponse,
    ProfileResponse,
    ProfileUpdate,
    PublicProfileResponse,
    SignupRequest,
    SignupResponse,
)
from .verification import VerificationResponse, VerificationReview, VerificationSubmit

__all__ = [
    "BlockResponse",
    "CommentCreate", "CommentResponse", "CommentUpdate",
    "CountResponse", "StatusResponse",
    "PendingMatchResponse",
    "NotificationCreate", "NotificationResponse", "UnreadCountResponse",
    "AuthorSummary", "PostCreate", "PostResponse", "PostUpdate", "VisibilityOverrideUpdate",
    "LoginRequest", "LoginResponse", "ProfileResponse", "ProfileUpdate",
    "PublicProfileResponse", "SignupRequest", "SignupResponse",
    "VerificationResponse", "VerificationReview", "VerificationSubmit",
]
