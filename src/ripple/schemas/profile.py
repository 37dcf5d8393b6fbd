"""Account and profile Pydantic schemas."""

import re
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ripple.models.enums import VerificationStatus

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _validate_email(value: str) -> str:
    candidate = value.strip().lower()
    if not _EMAIL_PATTERN.match(candidate):
        raise ValueError("Enter a valid email address")
    return candidate


class SignupRequest(BaseModel):
    """Schema for creating an account."""

    email: str = Field(..., max_length=320, description="Login email address")
    password: str = Field(..., min_length=8, max_length=256)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    display_name: str | None = Field(None, max_length=100)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize and sanity-check the email address."""
        return _validate_email(v)

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, v: str) -> str:
        """Reject names made only of whitespace."""
        if not v.strip():
            raise ValueError("First name is required")
        return v.strip()


class SignupResponse(BaseModel):
    """Returned after a successful signup."""

    user_id: int
    access_token: str
    token_type: str = "bearer"
    matched_stories: int = Field(..., description="Pending stories matched to the new account")


class LoginRequest(BaseModel):
    """Schema for login submissions."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Response returned after successful login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(..., description="Token type (typically 'bearer')")


class ProfileUpdate(BaseModel):
    """Fields a user may change on their own profile.

    Email and verification fields are deliberately absent.
    """

    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    display_name: str | None = Field(None, max_length=100)
    bio: str | None = Field(None, max_length=1000)
    avatar_url: str | None = Field(None, max_length=2048)
    interests: list[str] | None = None
    notification_preferences: dict[str, bool] | None = None

    model_config = ConfigDict(extra="forbid")


class PublicProfileResponse(BaseModel):
    """Profile fields visible to other users."""

    id: int
    first_name: str
    last_name: str | None
    display_name: str | None
    bio: str | None
    avatar_url: str | None
    verification_status: VerificationStatus
    interests: list[str]

    model_config = ConfigDict(from_attributes=True)


class ProfileResponse(PublicProfileResponse):
    """The caller's own profile."""

    email: str
    verification_submitted_at: datetime | None
    verified_at: datetime | None
    notification_preferences: dict[str, Any]
    created_at: datetime
    updated_at: datetime
