"""Directed user blocks.

A block hides the blocked user's stories from the blocker's feeds. It does
not notify the blocked user and does not affect what they can see.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ripple.models import Profile, UserBlock
from ripple.services.errors import Conflict, NotFound, ValidationFailed

logger = logging.getLogger(__name__)


def block_user(db: Session, blocker: Profile, blocked_id: int) -> UserBlock:
    """Block ``blocked_id`` on behalf of ``blocker``."""
    if blocked_id == blocker.id:
        raise ValidationFailed("user_id", "You cannot block yourself")
    if db.get(Profile, blocked_id) is None:
        raise NotFound("User")

    block = UserBlock(blocker_id=blocker.id, blocked_id=blocked_id)
    db.add(block)
    try:
        db.commit()
    except IntegrityError as err:
        db.rollback()
        raise Conflict("User already blocked") from err
    db.refresh(block)
    logger.info("User %s blocked user %s", blocker.id, blocked_id)
    return block


def unblock_user(db: Session, blocker: Profile, blocked_id: int) -> None:
    block = db.scalars(
        select(UserBlock).where(
            UserBlock.blocker_id == blocker.id, UserBlock.blocked_id == blocked_id
        )
    ).first()
    if block is None:
        raise NotFound("Block")
    db.delete(block)
    db.commit()


def list_blocks(db: Session, blocker: Profile) -> list[UserBlock]:
    """Return the caller's outgoing blocks, newest first."""
    stmt = (
        select(UserBlock)
        .where(UserBlock.blocker_id == blocker.id)
        .order_by(UserBlock.id.desc())
    )
    return list(db.scalars(stmt))
