"""Pending recipient match schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class PendingMatchResponse(BaseModel):
    """A free-text recipient awaiting (or matched to) an account."""

    id: int
    post_id: int
    recipient_name: str
    matched: bool
    matched_user_id: int | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
