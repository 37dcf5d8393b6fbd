# src/ripple/services/__init__.py
"""Business logic services for the Ripple application."""

from .errors import AccessDenied, Conflict, NotFound, RippleError, ValidationFailed
from .notifications import NotificationService

__all__ = [
    "AccessDenied",
    "Conflict",
    "NotFound",
    "RippleError",
    "ValidationFailed",
    "NotificationService",
]
