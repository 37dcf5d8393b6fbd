# src/ripple/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .auth import router as auth_router
from .blocks import router as blocks_router
from .comments import router as comments_router
from .feed import router as feed_router
from .matches import router as matches_router
from .notifications import router as notifications_router
from .posts import router as posts_router
from .profiles import router as profiles_router
from .verification import router as verification_router

__all__ = [
    "auth_router",
    "blocks_router",
    "comments_router",
    "feed_router",
    "matches_router",
    "notifications_router",
    "posts_router",
    "profiles_router",
    "verification_router",
]
