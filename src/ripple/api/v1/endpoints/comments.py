# src/ripple/api/v1/endpoints/comments.py
"""Comment editing endpoints for the Ripple API."""

from __future__ import annotations

from fastapi import APIRouter, status

from ripple.api.v1.dependencies import CurrentUserDep, SessionDep
from ripple.models import Comment
from ripple.schemas.comment import CommentResponse, CommentUpdate
from ripple.services import interactions

router = APIRouter(prefix="/comments", tags=["comments"])


@router.patch("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: int,
    payload: CommentUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Comment:
    """Edit the caller's own comment."""
    return interactions.update_comment(db, comment_id, current_user, payload.content)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(comment_id: int, current_user: CurrentUserDep, db: SessionDep) -> None:
    """Delete the caller's own comment and its replies."""
    interactions.delete_comment(db, comment_id, current_user)
