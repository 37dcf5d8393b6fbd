"""Comment-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CommentCreate(BaseModel):
    """Schema for commenting on a post or replying to a comment."""

    content: str = Field(..., max_length=2000)
    parent_comment_id: int | None = None

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Comments must contain text."""
        if not v.strip():
            raise ValueError("Comment cannot be empty")
        return v.strip()


class CommentUpdate(BaseModel):
    """Edit the text of an existing comment."""

    content: str = Field(..., min_length=1, max_length=2000)


class CommentResponse(BaseModel):
    """Schema for comment information returned by the API."""

    id: int
    post_id: int
    author_id: int
    parent_comment_id: int | None
    content: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
