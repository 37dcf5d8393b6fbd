# src/ripple/api/v1/endpoints/blocks.py
"""User block endpoints for the Ripple API."""

from __future__ import annotations

from fastapi import APIRouter, status

from ripple.api.v1.dependencies import CurrentUserDep, SessionDep
from ripple.models import UserBlock
from ripple.schemas.block import BlockResponse
from ripple.services import blocks

router = APIRouter(prefix="/blocks", tags=["blocks"])


@router.get("/", response_model=list[BlockResponse])
async def list_blocks(current_user: CurrentUserDep, db: SessionDep) -> list[UserBlock]:
    return blocks.list_blocks(db, current_user)


@router.post("/{user_id}", response_model=BlockResponse, status_code=status.HTTP_201_CREATED)
async def block_user(user_id: int, current_user: CurrentUserDep, db: SessionDep) -> UserBlock:
    """Hide another user's stories from the caller's feeds."""
    return blocks.block_user(db, current_user, user_id)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def unblock_user(user_id: int, current_user: CurrentUserDep, db: SessionDep) -> None:
    blocks.unblock_user(db, current_user, user_id)
