# src/ripple/api/v1/endpoints/profiles.py
"""Profile endpoints for the Ripple API."""

from __future__ import annotations

from fastapi import APIRouter, Query, status

from ripple.api.v1.dependencies import CurrentUserDep, SessionDep
from ripple.models import Profile
from ripple.schemas.profile import ProfileResponse, ProfileUpdate, PublicProfileResponse
from ripple.services import user_service
from ripple.services.errors import NotFound

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/me", response_model=ProfileResponse)
async def read_my_profile(current_user: CurrentUserDep) -> Profile:
    """Return the caller's own profile."""
    return current_user


@router.patch("/me", response_model=ProfileResponse)
async def update_my_profile(
    update_data: ProfileUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Profile:
    """Edit the caller's own profile; other profiles are never writable."""
    return user_service.update_profile(db, current_user, update_data)


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
async def delete_my_account(current_user: CurrentUserDep, db: SessionDep) -> None:
    """Delete the caller's account. Stories they wrote remain, unattributed."""
    user_service.delete_account(db, current_user)


@router.get("/search", response_model=list[PublicProfileResponse])
async def search_profiles(
    current_user: CurrentUserDep,
    db: SessionDep,
    q: str = Query(..., max_length=100, description="Name fragment to search for"),
) -> list[Profile]:
    """Find people to tag as story recipients."""
    return list(user_service.search_profiles(db, q))


@router.get("/{user_id}", response_model=PublicProfileResponse)
async def read_profile(user_id: int, db: SessionDep) -> Profile:
    profile = user_service.get_profile(db, user_id)
    if profile is None:
        raise NotFound("User")
    return profile
