# src/ripple/api/v1/endpoints/matches.py
"""Pending recipient match endpoints for the Ripple API."""

from __future__ import annotations

from fastapi import APIRouter

from ripple.api.v1.dependencies import CurrentUserDep, SessionDep
from ripple.models import PendingRecipientMatch
from ripple.schemas.matching import PendingMatchResponse
from ripple.services import matching

router = APIRouter(prefix="/matches", tags=["matches"])


@router.get("/", response_model=list[PendingMatchResponse])
async def list_matches(current_user: CurrentUserDep, db: SessionDep) -> list[PendingRecipientMatch]:
    """Unclaimed recipients plus those already matched to the caller."""
    return matching.list_visible_matches(db, current_user.id)


@router.post("/{match_id}/claim", response_model=PendingMatchResponse)
async def claim_match(
    match_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> PendingRecipientMatch:
    """Claim an unmatched recipient row; rows held by someone else are refused."""
    return matching.claim_match(db, match_id, current_user)
