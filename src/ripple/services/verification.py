"""Identity verification workflow."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from ripple.core.settings import settings
from ripple.db.time import utcnow
from ripple.models import (
    NotificationType,
    Profile,
    VerificationRequest,
    VerificationRequestStatus,
    VerificationStatus,
)
from ripple.schemas.verification import VerificationReview, VerificationSubmit
from ripple.services.errors import AccessDenied, Conflict, NotFound
from ripple.services.notifications import NotificationService

logger = logging.getLogger(__name__)


def submit_request(db: Session, user: Profile, payload: VerificationSubmit) -> VerificationRequest:
    """Queue a document for review and mark the profile as submitted."""
    if user.verification_status == VerificationStatus.VERIFIED:
        raise Conflict("Your account is already verified")

    pending = db.scalars(
        select(VerificationRequest).where(
            VerificationRequest.user_id == user.id,
            VerificationRequest.status == VerificationRequestStatus.PENDING,
        )
    ).first()
    if pending is not None:
        raise Conflict("A verification request is already awaiting review")

    request = VerificationRequest(
        user_id=user.id,
        document_url=payload.document_url.strip(),
        document_type=payload.document_type,
        status=VerificationRequestStatus.PENDING,
    )
    db.add(request)
    user.verification_status = VerificationStatus.PENDING
    user.verification_submitted_at = utcnow()
    db.commit()
    db.refresh(request)
    logger.info("User %s submitted verification request %s", user.id, request.id)
    return request


def list_own_requests(db: Session, user: Profile) -> list[VerificationRequest]:
    stmt = (
        select(VerificationRequest)
        .where(VerificationRequest.user_id == user.id)
        .order_by(VerificationRequest.id.desc())
    )
    return list(db.scalars(stmt))


def _require_reviewer(user: Profile) -> None:
    if not settings.is_reviewer(user.email):
        raise AccessDenied(f"user {user.id} is not a verification reviewer")


def list_pending(db: Session, reviewer: Profile) -> list[VerificationRequest]:
    """Return requests awaiting review, oldest first."""
    _require_reviewer(reviewer)
    stmt = (
        select(VerificationRequest)
        .where(VerificationRequest.status == VerificationRequestStatus.PENDING)
        .order_by(VerificationRequest.id)
    )
    return list(db.scalars(stmt))


def review_request(
    db: Session,
    request_id: int,
    reviewer: Profile,
    decision: VerificationReview,
) -> VerificationRequest:
    """Approve or reject a pending request and tell the applicant.

    Raises:
        AccessDenied: If the caller is not a reviewer.
        NotFound: If the request does not exist.
        Conflict: If the request was already reviewed.
    """
    _require_reviewer(reviewer)
    request = db.get(VerificationRequest, request_id)
    if request is None:
        raise NotFound("Verification request")
    if request.status != VerificationRequestStatus.PENDING:
        raise Conflict("This request has already been reviewed")

    now = utcnow()
    applicant = db.get(Profile, request.user_id)
    request.reviewed_at = now
    if decision.decision == "approve":
        request.status = VerificationRequestStatus.APPROVED
        request.rejection_reason = None
        message = "Your identity has been verified"
        if applicant is not None:
            applicant.verification_status = VerificationStatus.VERIFIED
            applicant.verified_at = now
    else:
        request.status = VerificationRequestStatus.REJECTED
        request.rejection_reason = (decision.rejection_reason or "").strip()
        message = f"Your verification was not approved: {request.rejection_reason}"
        if applicant is not None:
            applicant.verification_status = VerificationStatus.REJECTED

    NotificationService.emit_system(
        db,
        user_id=request.user_id,
        type_=NotificationType.VERIFICATION_COMPLETE,
        message=message,
        triggering_user_id=reviewer.id,
    )
    db.commit()
    db.refresh(request)
    logger.info(
        "Reviewer %s %s verification request %s",
        reviewer.id,
        request.status.value,
        request.id,
    )
    return request
