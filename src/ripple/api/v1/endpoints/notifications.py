# src/ripple/api/v1/endpoints/notifications.py
"""Notification inbox endpoints for the Ripple API.

Clients poll ``/notifications/unread-count`` at the advertised interval.
"""

from __future__ import annotations

from fastapi import APIRouter, Query, status

from ripple.api.v1.dependencies import CurrentUserDep, SessionDep
from ripple.core.settings import settings
from ripple.models import Notification
from ripple.schemas.common import CountResponse
from ripple.schemas.notification import (
    NotificationCreate,
    NotificationResponse,
    UnreadCountResponse,
)
from ripple.services.notifications import NotificationService

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/", response_model=list[NotificationResponse])
async def list_notifications(
    current_user: CurrentUserDep,
    db: SessionDep,
    limit: int | None = Query(None, ge=1, le=200),
) -> list[Notification]:
    """Return the caller's notifications, newest first."""
    return NotificationService.list_for_user(db, current_user.id, limit)


@router.get("/unread-count", response_model=UnreadCountResponse)
async def unread_count(current_user: CurrentUserDep, db: SessionDep) -> UnreadCountResponse:
    return UnreadCountResponse(
        unread=NotificationService.unread_count(db, current_user.id),
        poll_interval_seconds=settings.notification_poll_seconds,
    )


@router.post("/", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def create_notification(
    payload: NotificationCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Notification:
    """Send a notification about a story the caller wrote or was tagged in."""
    notification = NotificationService.emit_for_actor(
        db,
        current_user,
        user_id=payload.user_id,
        type_=payload.type,
        message=payload.message,
        post_id=payload.post_id,
    )
    db.commit()
    db.refresh(notification)
    return notification


@router.post("/read-all", response_model=CountResponse)
async def mark_all_read(current_user: CurrentUserDep, db: SessionDep) -> CountResponse:
    return CountResponse(updated=NotificationService.mark_all_read(db, current_user.id))


@router.post("/{notification_id}/read", response_model=NotificationResponse)
async def mark_read(
    notification_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Notification:
    return NotificationService.mark_read(db, current_user.id, notification_id)
