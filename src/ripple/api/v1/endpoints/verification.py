# src/ripple/api/v1/endpoints/verification.py
"""Identity verification endpoints for the Ripple API."""

from __future__ import annotations

from fastapi import APIRouter, status

from ripple.api.v1.dependencies import CurrentUserDep, SessionDep
from ripple.models import VerificationRequest
from ripple.schemas.verification import (
    VerificationResponse,
    VerificationReview,
    VerificationSubmit,
)
from ripple.services import verification

router = APIRouter(prefix="/verification", tags=["verification"])


@router.post("/", response_model=VerificationResponse, status_code=status.HTTP_201_CREATED)
async def submit_verification(
    payload: VerificationSubmit,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> VerificationRequest:
    """Submit an identity document reference for review."""
    return verification.submit_request(db, current_user, payload)


@router.get("/mine", response_model=list[VerificationResponse])
async def my_requests(current_user: CurrentUserDep, db: SessionDep) -> list[VerificationRequest]:
    return verification.list_own_requests(db, current_user)


@router.get("/pending", response_model=list[VerificationResponse])
async def pending_requests(
    current_user: CurrentUserDep,
    db: SessionDep,
) -> list[VerificationRequest]:
    """Requests awaiting review. Reviewers only."""
    return verification.list_pending(db, current_user)


@router.post("/{request_id}/review", response_model=VerificationResponse)
async def review_request(
    request_id: int,
    payload: VerificationReview,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> VerificationRequest:
    """Approve or reject a pending request. Reviewers only."""
    return verification.review_request(db, request_id, current_user, payload)
