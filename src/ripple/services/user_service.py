"""Account and profile management."""
from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.orm import Session

from ripple.core import security
from ripple.core.settings import settings
from ripple.models import (
    Bookmark,
    Comment,
    Notification,
    PendingRecipientMatch,
    Post,
    PostLike,
    Profile,
    UserBlock,
    VerificationRequest,
    VerificationStatus,
)
from ripple.schemas.profile import ProfileUpdate, SignupRequest
from ripple.services.engagement import refresh_post_engagement
from ripple.services.errors import Conflict, ValidationFailed
from ripple.services.matching import reconcile_new_account

logger = logging.getLogger(__name__)

__all__ = [
    "get_profile",
    "get_profile_by_email",
    "create_account",
    "authenticate",
    "update_profile",
    "search_profiles",
    "delete_account",
]


def get_profile(db: Session, user_id: int) -> Profile | None:
    """Return a single profile by primary key."""
    return db.get(Profile, user_id)


def get_profile_by_email(db: Session, email: str) -> Profile | None:
    """Return the profile registered under ``email`` (case-insensitive)."""
    return db.scalars(select(Profile).where(Profile.email == email.strip().lower())).first()


def create_account(db: Session, payload: SignupRequest) -> tuple[Profile, int]:
    """Register a new account and reconcile pending story recipients.

    Returns:
        The new profile and the number of pending matches claimed for it.

    Raises:
        Conflict: If the email is already registered.
    """
    email = payload.email.strip().lower()
    if get_profile_by_email(db, email) is not None:
        raise Conflict("An account with this email already exists")

    first_name = payload.first_name.strip()
    if not first_name:
        raise ValidationFailed("first_name", "First name is required")

    profile = Profile(
        email=email,
        password_hash=security.hash_password(payload.password),
        first_name=first_name,
        last_name=(payload.last_name or "").strip() or None,
        display_name=(payload.display_name or "").strip() or None,
        verification_status=VerificationStatus.PENDING,
    )
    db.add(profile)
    db.flush()

    matches = reconcile_new_account(db, profile)
    db.commit()
    db.refresh(profile)
    logger.info("Created account %s", profile.id)
    return profile, len(matches)


def authenticate(db: Session, email: str, password: str) -> Profile | None:
    """Return the profile if ``password`` is correct, otherwise None."""
    profile = get_profile_by_email(db, email)
    if profile is None or not security.verify_password(password, profile.password_hash):
        return None
    return profile


def update_profile(db: Session, profile: Profile, update_data: ProfileUpdate) -> Profile:
    """Apply partial updates to the caller's own profile."""
    update_dict = update_data.model_dump(exclude_unset=True)
    if "first_name" in update_dict:
        first_name = (update_dict["first_name"] or "").strip()
        if not first_name:
            raise ValidationFailed("first_name", "First name is required")
        update_dict["first_name"] = first_name

    for key, value in update_dict.items():
        setattr(profile, key, value)

    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


def search_profiles(db: Session, query: str, limit: int | None = None) -> Sequence[Profile]:
    """Find recipients by first, last or display name substring."""
    term = query.strip()
    if len(term) < settings.search_min_characters:
        raise ValidationFailed(
            "q", f"Enter at least {settings.search_min_characters} characters"
        )
    pattern = f"%{term.lower()}%"
    stmt = (
        select(Profile)
        .where(
            or_(
                func.lower(Profile.first_name).like(pattern),
                func.lower(Profile.last_name).like(pattern),
                func.lower(Profile.display_name).like(pattern),
            )
        )
        .order_by(Profile.id)
        .limit(limit or settings.search_max_results)
    )
    return db.scalars(stmt).all()


def delete_account(db: Session, profile: Profile) -> None:
    """Remove an account while keeping the stories it wrote.

    Authored posts survive with ``author_id`` cleared; the first-name snapshot
    keeps the attribution. Likes and comments by the account are removed and
    the affected posts re-scored in the same transaction.
    """
    user_id = profile.id
    touched_posts = set(
        db.scalars(select(PostLike.post_id).where(PostLike.user_id == user_id))
    ) | set(db.scalars(select(Comment.post_id).where(Comment.author_id == user_id)))

    db.execute(update(Post).where(Post.author_id == user_id).values(author_id=None))
    db.execute(update(Post).where(Post.recipient_id == user_id).values(recipient_id=None))
    db.execute(
        update(PendingRecipientMatch)
        .where(PendingRecipientMatch.matched_user_id == user_id)
        .values(matched_user_id=None)
    )

    for comment in list(db.scalars(select(Comment).where(Comment.author_id == user_id))):
        db.delete(comment)
    db.flush()
    db.execute(delete(PostLike).where(PostLike.user_id == user_id))
    db.execute(delete(Bookmark).where(Bookmark.user_id == user_id))
    db.execute(
        delete(Notification).where(
            or_(Notification.user_id == user_id, Notification.triggering_user_id == user_id)
        )
    )
    db.execute(
        delete(UserBlock).where(
            or_(UserBlock.blocker_id == user_id, UserBlock.blocked_id == user_id)
        )
    )
    db.execute(delete(VerificationRequest).where(VerificationRequest.user_id == user_id))
    db.delete(profile)
    db.flush()

    for post_id in touched_posts:
        refresh_post_engagement(db, post_id)

    db.commit()
    logger.info("Deleted account %s; re-scored %d post(s)", user_id, len(touched_posts))
