"""Identity verification schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ripple.models.enums import DocumentType, VerificationRequestStatus


class VerificationSubmit(BaseModel):
    """Submit an identity document reference for review."""

    document_url: str = Field(..., min_length=1, max_length=2048)
    document_type: DocumentType


class VerificationReview(BaseModel):
    """A reviewer's decision on a pending request."""

    decision: Literal["approve", "reject"]
    rejection_reason: str | None = Field(None, max_length=1000)

    @model_validator(mode="after")
    def require_reason_on_reject(self) -> "VerificationReview":
        """Rejections must explain themselves."""
        if self.decision == "reject" and not (self.rejection_reason or "").strip():
            raise ValueError("A rejection reason is required")
        return self


class VerificationResponse(BaseModel):
    """Schema for verification requests returned by the API."""

    id: int
    user_id: int
    document_type: DocumentType
    status: VerificationRequestStatus
    rejection_reason: str | None
    reviewed_at: datetime | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
