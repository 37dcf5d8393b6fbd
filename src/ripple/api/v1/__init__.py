# src/ripple/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    auth_router,
    blocks_router,
    comments_router,
    feed_router,
    matches_router,
    notifications_router,
    posts_router,
    profiles_router,
    verification_router,
)

__all__ = [
    "auth_router",
    "profiles_router",
    "posts_router",
    "comments_router",
    "feed_router",
    "notifications_router",
    "matches_router",
    "verification_router",
    "blocks_router",
]
