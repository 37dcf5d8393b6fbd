"""Domain errors raised by the service layer.

The API layer maps these onto HTTP responses in :mod:`ripple.main`.
"""

from __future__ import annotations


class RippleError(Exception):
    """Base class for expected, request-local failures."""


class AccessDenied(RippleError):
    """The caller fails the authorization predicate for this row and action.

    The reason is kept for server-side logs only and never returned to clients.
    """

    def __init__(self, reason: str = "access denied") -> None:
        super().__init__(reason)
        self.reason = reason


class NotFound(RippleError):
    """The row does not exist or is not visible to the caller."""

    def __init__(self, what: str = "Resource") -> None:
        super().__init__(f"{what} not found")
        self.what = what


class ValidationFailed(RippleError):
    """A field failed a business rule that the request schema cannot express."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class Conflict(RippleError):
    """The mutation would violate a uniqueness or state-transition rule."""
