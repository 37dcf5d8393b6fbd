# src/ripple/api/v1/endpoints/posts.py
"""Story endpoints for the Ripple API."""

from __future__ import annotations

from fastapi import APIRouter, status
from sqlalchemy.orm import Session

from ripple.api.v1.dependencies import CurrentUserDep, OptionalUserDep, SessionDep
from ripple.models import Comment
from ripple.repositories.post_repo import PostRepository
from ripple.schemas.comment import CommentCreate, CommentResponse
from ripple.schemas.common import StatusResponse
from ripple.schemas.post import PostCreate, PostResponse, PostUpdate, VisibilityOverrideUpdate
from ripple.services import interactions, post_service
from ripple.services.errors import NotFound
from ripple.services.visibility import can_view

router = APIRouter(prefix="/posts", tags=["posts"])


def _single(db: Session, post_id: int, viewer_id: int | None) -> PostResponse:
    post = post_service.get_post_for_viewer(db, post_id, viewer_id)
    return post_service.to_post_responses(db, [post], viewer_id)[0]


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> PostResponse:
    """Publish a story about someone who made a difference."""
    post = post_service.create_post(db, current_user, post_data)
    return post_service.to_post_responses(db, [post], current_user.id)[0]


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: int, db: SessionDep, viewer: OptionalUserDep) -> PostResponse:
    """Return one story if the caller may read it; hidden stories are reported missing."""
    return _single(db, post_id, viewer.id if viewer else None)


@router.patch("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: int,
    update_data: PostUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> PostResponse:
    post = post_service.get_post_for_viewer(db, post_id, current_user.id)
    post_service.update_post(db, post, current_user, update_data)
    return _single(db, post_id, current_user.id)


@router.put("/{post_id}/visibility", response_model=PostResponse)
async def set_visibility_override(
    post_id: int,
    payload: VisibilityOverrideUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> PostResponse:
    """Let the tagged recipient override who can see the story."""
    post = PostRepository(db).get_by_id(post_id)
    if post is None or (not can_view(post, current_user.id) and post.recipient_id != current_user.id):
        raise NotFound("Post")
    post = post_service.set_recipient_override(
        db, post, current_user, payload.recipient_visibility_override
    )
    return post_service.to_post_responses(db, [post], current_user.id)[0]


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: int, current_user: CurrentUserDep, db: SessionDep) -> None:
    post = post_service.get_post_for_viewer(db, post_id, current_user.id)
    post_service.delete_post(db, post, current_user)


@router.post("/{post_id}/like", response_model=PostResponse)
async def like_post(post_id: int, current_user: CurrentUserDep, db: SessionDep) -> PostResponse:
    """Like a story and return its refreshed counters."""
    post = post_service.get_post_for_viewer(db, post_id, current_user.id)
    interactions.like_post(db, post, current_user)
    return _single(db, post_id, current_user.id)


@router.delete("/{post_id}/like", response_model=PostResponse)
async def unlike_post(post_id: int, current_user: CurrentUserDep, db: SessionDep) -> PostResponse:
    post = post_service.get_post_for_viewer(db, post_id, current_user.id)
    interactions.unlike_post(db, post, current_user)
    return _single(db, post_id, current_user.id)


@router.post("/{post_id}/bookmark", response_model=StatusResponse, status_code=status.HTTP_201_CREATED)
async def bookmark_post(post_id: int, current_user: CurrentUserDep, db: SessionDep) -> StatusResponse:
    post = post_service.get_post_for_viewer(db, post_id, current_user.id)
    interactions.add_bookmark(db, post, current_user)
    return StatusResponse(status="saved")


@router.delete("/{post_id}/bookmark", status_code=status.HTTP_204_NO_CONTENT)
async def remove_bookmark(post_id: int, current_user: CurrentUserDep, db: SessionDep) -> None:
    interactions.remove_bookmark(db, post_id, current_user)


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
async def list_comments(post_id: int, db: SessionDep, viewer: OptionalUserDep) -> list[Comment]:
    """Return the comments of a readable story, oldest first."""
    post = post_service.get_post_for_viewer(db, post_id, viewer.id if viewer else None)
    return interactions.list_comments(db, post)


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: int,
    payload: CommentCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Comment:
    post = post_service.get_post_for_viewer(db, post_id, current_user.id)
    return interactions.add_comment(
        db, post, current_user, payload.content, payload.parent_comment_id
    )
