# src/ripple/api/v1/endpoints/auth.py
"""Authentication endpoints for the Ripple API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ripple.api.v1.dependencies import SessionDep
from ripple.core.security import create_access_token
from ripple.schemas.profile import LoginRequest, LoginResponse, SignupRequest, SignupResponse
from ripple.services import user_service

router = APIRouter(prefix="/auth", tags=["authentication"])
logger = logging.getLogger(__name__)


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
async def signup(payload: SignupRequest, db: SessionDep) -> SignupResponse:
    """Create an account and claim any stories already written about its owner."""
    profile, matched = user_service.create_account(db, payload)
    return SignupResponse(
        user_id=profile.id,
        access_token=create_access_token(profile.id),
        matched_stories=matched,
    )


@router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest, db: SessionDep) -> LoginResponse:
    """Exchange email and password for a bearer token."""
    profile = user_service.authenticate(db, payload.email, payload.password)
    if profile is None:
        logger.info("Failed login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    return LoginResponse(access_token=create_access_token(profile.id), token_type="bearer")
