"""Notification Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ripple.models.enums import NotificationType


class NotificationCreate(BaseModel):
    """A notification sent by a user about a post they wrote or were tagged in."""

    user_id: int = Field(..., description="Recipient of the notification")
    type: NotificationType
    post_id: int
    message: str = Field(..., min_length=1, max_length=500)


class NotificationResponse(BaseModel):
    """Schema for notification information returned by the API."""

    id: int
    user_id: int
    type: NotificationType
    post_id: int | None
    triggering_user_id: int | None
    message: str
    read: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UnreadCountResponse(BaseModel):
    """Unread badge count plus the interval clients should poll at."""

    unread: int
    poll_interval_seconds: int
