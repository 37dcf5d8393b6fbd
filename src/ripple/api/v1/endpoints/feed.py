# src/ripple/api/v1/endpoints/feed.py
"""Feed endpoints for the Ripple API.

Public and tagged feeds page backwards by post id: pass the smallest id of
the previous page as ``before``.
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from ripple.api.v1.dependencies import CurrentUserDep, OptionalUserDep, SessionDep
from ripple.core.settings import settings
from ripple.repositories.post_repo import PostRepository
from ripple.schemas.post import PostResponse
from ripple.services.engagement import top_stories
from ripple.services.post_service import to_post_responses

router = APIRouter(prefix="/feed", tags=["feed"])


def _limit(limit: int | None) -> int:
    return min(limit or settings.feed_default_limit, settings.feed_max_limit)


@router.get("/public", response_model=list[PostResponse])
async def public_feed(
    db: SessionDep,
    viewer: OptionalUserDep,
    limit: int | None = Query(None, ge=1, description="Maximum number of posts to return"),
    before: int | None = Query(None, description="Return posts with an id below this one"),
) -> list[PostResponse]:
    """Public stories, newest first."""
    viewer_id = viewer.id if viewer else None
    posts = PostRepository(db).list_public(viewer_id, limit=_limit(limit), before=before)
    return to_post_responses(db, posts, viewer_id)


@router.get("/tagged", response_model=list[PostResponse])
async def tagged_feed(
    current_user: CurrentUserDep,
    db: SessionDep,
    limit: int | None = Query(None, ge=1),
    before: int | None = Query(None),
) -> list[PostResponse]:
    """Stories in which the caller is the registered recipient."""
    posts = PostRepository(db).list_tagged(current_user.id, limit=_limit(limit), before=before)
    return to_post_responses(db, posts, current_user.id)


@router.get("/top", response_model=list[PostResponse])
async def top_feed(
    db: SessionDep,
    viewer: OptionalUserDep,
    limit: int | None = Query(None, ge=1),
) -> list[PostResponse]:
    """Public stories ranked by engagement score."""
    viewer_id = viewer.id if viewer else None
    capped = min(limit, settings.feed_max_limit) if limit else None
    return to_post_responses(db, top_stories(db, viewer_id, capped), viewer_id)


@router.get("/saved", response_model=list[PostResponse])
async def saved_feed(
    current_user: CurrentUserDep,
    db: SessionDep,
    limit: int | None = Query(None, ge=1),
) -> list[PostResponse]:
    """The caller's bookmarks that are still visible, most recently saved first."""
    posts = PostRepository(db).list_saved(current_user.id, limit=_limit(limit))
    return to_post_responses(db, posts, current_user.id)
