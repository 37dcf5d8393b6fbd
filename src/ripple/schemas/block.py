"""User block schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class BlockResponse(BaseModel):
    """A directed block edge owned by the caller."""

    id: int
    blocker_id: int
    blocked_id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
