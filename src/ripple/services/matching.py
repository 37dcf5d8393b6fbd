"""Reconcile free-text story recipients with accounts created later.

A post whose recipient is not a registered user leaves a pending match row
behind. When someone signs up, unmatched rows whose name or email matches the
new account are claimed for that account and a ``match_found`` notification
is emitted. Rows that find no match stay pending; nothing re-scans them.

Claiming is a conditional update: it only succeeds while the row is
unmatched or already matched to the claimant, and it can only ever write the
claimant's own id. A second claimant therefore always loses.
"""

from __future__ import annotations

import logging

from sqlalchemy import func, or_, select, update
from sqlalchemy.orm import Session

from ripple.models import NotificationType, PendingRecipientMatch, Post, Profile
from ripple.services.errors import AccessDenied, NotFound
from ripple.services.notifications import NotificationService

logger = logging.getLogger(__name__)

MATCH_FOUND_MESSAGE = "Someone shared a story about how you made a difference"


def normalize_name(value: str) -> str:
    """Collapse internal whitespace and lower-case a person's name."""
    return " ".join(value.split()).lower()


def candidate_names(profile: Profile) -> set[str]:
    """Return the normalized names under which ``profile`` may have been tagged."""
    names = {normalize_name(profile.full_name)}
    if profile.display_name:
        names.add(normalize_name(profile.display_name))
    return {name for name in names if name}


def record_pending_match(
    db: Session,
    post: Post,
    recipient_name: str,
    recipient_email: str | None = None,
) -> PendingRecipientMatch:
    """Track an anonymous recipient of ``post`` until they sign up."""
    match = PendingRecipientMatch(
        post_id=post.id,
        recipient_name=" ".join(recipient_name.split()),
        recipient_email=recipient_email.strip().lower() if recipient_email else None,
        matched=False,
    )
    db.add(match)
    return match


def _claim_row(db: Session, match_id: int, user_id: int) -> bool:
    """Atomically mark a row matched to ``user_id``; False if someone else holds it."""
    result = db.execute(
        update(PendingRecipientMatch)
        .where(
            PendingRecipientMatch.id == match_id,
            or_(
                PendingRecipientMatch.matched.is_(False),
                PendingRecipientMatch.matched_user_id == user_id,
            ),
        )
        .values(matched=True, matched_user_id=user_id)
        .execution_options(synchronize_session="fetch")
    )
    return bool(result.rowcount)


def reconcile_new_account(db: Session, profile: Profile) -> list[PendingRecipientMatch]:
    """Claim every unmatched row that names or addresses ``profile``.

    Runs inside the signup transaction; the caller commits.
    """
    db.flush()
    conditions = []
    names = candidate_names(profile)
    if names:
        conditions.append(func.lower(PendingRecipientMatch.recipient_name).in_(names))
    conditions.append(func.lower(PendingRecipientMatch.recipient_email) == profile.email.lower())

    candidates = list(
        db.scalars(
            select(PendingRecipientMatch)
            .where(PendingRecipientMatch.matched.is_(False), or_(*conditions))
            .order_by(PendingRecipientMatch.id)
        )
    )

    claimed: list[PendingRecipientMatch] = []
    for match in candidates:
        if not _claim_row(db, match.id, profile.id):
            continue
        NotificationService.emit_system(
            db,
            user_id=profile.id,
            type_=NotificationType.MATCH_FOUND,
            message=MATCH_FOUND_MESSAGE,
            post_id=match.post_id,
        )
        claimed.append(match)

    if claimed:
        logger.info("Matched %d pending recipient(s) to user %s", len(claimed), profile.id)
    return claimed


def list_visible_matches(db: Session, user_id: int) -> list[PendingRecipientMatch]:
    """Return unmatched rows plus rows already matched to the user."""
    stmt = (
        select(PendingRecipientMatch)
        .where(
            or_(
                PendingRecipientMatch.matched.is_(False),
                PendingRecipientMatch.matched_user_id == user_id,
            )
        )
        .order_by(PendingRecipientMatch.id.desc())
    )
    return list(db.scalars(stmt))


def claim_match(db: Session, match_id: int, claimant: Profile) -> PendingRecipientMatch:
    """Claim a pending match for ``claimant``.

    Raises:
        NotFound: If the row does not exist.
        AccessDenied: If the row is already matched to a different user.
    """
    match = db.get(PendingRecipientMatch, match_id)
    if match is None:
        raise NotFound("Match")

    if not _claim_row(db, match_id, claimant.id):
        db.rollback()
        raise AccessDenied(f"match {match_id} belongs to another user")

    db.commit()
    db.refresh(match)
    logger.info("User %s claimed pending match %s", claimant.id, match_id)
    return match
