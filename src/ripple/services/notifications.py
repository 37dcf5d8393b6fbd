"""Notification emission and inbox management."""

from __future__ import annotations

import logging

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from ripple.core.settings import settings
from ripple.models import Notification, NotificationType, Post, Profile
from ripple.services.errors import AccessDenied, NotFound, ValidationFailed

logger = logging.getLogger(__name__)

USER_NOTIFICATION_TYPES = frozenset({NotificationType.TAGGED, NotificationType.COMMENT})


class NotificationService:
    """Creates notifications as side effects of other mutations."""

    @staticmethod
    def emit_system(
        db: Session,
        *,
        user_id: int,
        type_: NotificationType,
        message: str,
        post_id: int | None = None,
        triggering_user_id: int | None = None,
    ) -> Notification:
        """Add a notification produced by the system itself.

        Used from within a service transaction (like, comment, match found,
        verification result), mirroring what a database trigger would do.
        The caller owns the commit.
        """
        notification = Notification(
            user_id=user_id,
            type=type_,
            post_id=post_id,
            triggering_user_id=triggering_user_id,
            message=message,
            read=False,
        )
        db.add(notification)
        logger.info("Queued %s notification for user %s (post %s)", type_.value, user_id, post_id)
        return notification

    @staticmethod
    def emit_for_actor(
        db: Session,
        actor: Profile,
        *,
        user_id: int,
        type_: NotificationType,
        message: str,
        post_id: int | None,
    ) -> Notification:
        """Add a notification on behalf of ``actor``.

        Only the author or the tagged recipient of the referenced post may
        do this; anyone else is rejected, so users cannot forge notices
        addressed to arbitrary accounts. Only ``tagged`` and ``comment`` notices
        may be sent this way; the other types are emitted by the system.

        Raises:
            AccessDenied: If the actor is unrelated to the referenced post.
            ValidationFailed: If the type is system-only or ``user_id`` names
                no account.
        """
        if type_ not in USER_NOTIFICATION_TYPES:
            raise ValidationFailed("type", f"{type_.value} notifications are sent by the system")
        if post_id is None:
            raise AccessDenied("user-created notifications must reference a post")
        post = db.get(Post, post_id)
        if post is None:
            raise AccessDenied(f"post {post_id} does not exist")
        if actor.id not in {post.author_id, post.recipient_id}:
            raise AccessDenied(
                f"user {actor.id} is neither author nor recipient of post {post_id}"
            )
        if db.get(Profile, user_id) is None:
            raise ValidationFailed("user_id", "Recipient not found")
        return NotificationService.emit_system(
            db,
            user_id=user_id,
            type_=type_,
            message=message,
            post_id=post_id,
            triggering_user_id=actor.id,
        )

    @staticmethod
    def list_for_user(db: Session, user_id: int, limit: int | None = None) -> list[Notification]:
        """Return the user's notifications, newest first."""
        stmt = (
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(Notification.id.desc())
            .limit(limit or settings.notification_list_limit)
        )
        return list(db.scalars(stmt))

    @staticmethod
    def unread_count(db: Session, user_id: int) -> int:
        """Return how many notifications the user has not read yet."""
        count = db.scalar(
            select(func.count(Notification.id)).where(
                Notification.user_id == user_id,
                Notification.read.is_(False),
            )
        )
        return int(count or 0)

    @staticmethod
    def mark_read(db: Session, user_id: int, notification_id: int) -> Notification:
        """Mark one of the user's notifications as read. Already-read rows stay read."""
        notification = db.get(Notification, notification_id)
        if notification is None or notification.user_id != user_id:
            raise NotFound("Notification")
        if not notification.read:
            notification.read = True
            db.commit()
            db.refresh(notification)
        return notification

    @staticmethod
    def mark_all_read(db: Session, user_id: int) -> int:
        """Mark every unread notification of the user as read; return how many changed."""
        result = db.execute(
            update(Notification)
            .where(Notification.user_id == user_id, Notification.read.is_(False))
            .values(read=True)
            .execution_options(synchronize_session="fetch")
        )
        db.commit()
        return int(result.rowcount or 0)
