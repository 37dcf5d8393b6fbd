# src/ripple/schemas/post.py
"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from ripple.models.enums import PosterAnonymity, PrivacyLevel, RecipientType


class PostCreate(BaseModel):
    """Schema for creating a new story.

    Tag a registered user with ``recipient_id``, or name someone who has no
    account yet with ``recipient_name`` (and optionally their email).
    """

    content: str = Field(..., max_length=5000, description="The story")
    recipient_id: int | None = Field(None, description="Registered recipient")
    recipient_name: str | None = Field(
        None,
        max_length=200,
        validate_default=True,
        description="Who the story is about",
    )
    recipient_email: str | None = Field(None, max_length=320)
    privacy_level: PrivacyLevel = PrivacyLevel.PUBLIC
    poster_anonymity: PosterAnonymity = PosterAnonymity.FULL_PROFILE
    interests: list[str] = Field(default_factory=list, max_length=20)

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Stories must contain text."""
        if not v.strip():
            raise ValueError("Please share your story")
        return v.strip()

    @field_validator("recipient_name")
    @classmethod
    def validate_recipient_name(cls, v: str | None, info: ValidationInfo) -> str | None:
        """Anonymous recipients need a name."""
        name = (v or "").strip()
        if not name and info.data.get("recipient_id") is None:
            raise ValueError("Please specify who this story is about")
        return name or None


class PostUpdate(BaseModel):
    """Fields the author may change after publishing."""

    content: str | None = Field(None, min_length=1, max_length=5000)
    privacy_level: PrivacyLevel | None = None
    poster_anonymity: PosterAnonymity | None = None
    interests: list[str] | None = Field(None, max_length=20)

    model_config = ConfigDict(extra="forbid")


class VisibilityOverrideUpdate(BaseModel):
    """The tagged recipient's override; ``null`` clears it."""

    recipient_visibility_override: PrivacyLevel | None


class AuthorSummary(BaseModel):
    """Author details shown when the author chose a full profile."""

    id: int
    display_name: str
    avatar_url: str | None


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: int
    author_id: int | None
    author_first_name: str
    author: AuthorSummary | None = None
    content: str
    recipient_type: RecipientType
    recipient_id: int | None
    recipient_name: str
    privacy_level: PrivacyLevel
    recipient_visibility_override: PrivacyLevel | None
    poster_anonymity: PosterAnonymity
    interests: list[str]
    like_count: int
    comment_count: int
    engagement_score: float
    created_at: datetime
    updated_at: datetime
    is_liked: bool = False
    is_bookmarked: bool = False
