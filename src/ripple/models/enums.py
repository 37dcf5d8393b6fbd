"""Enumerated value domains shared by the ORM models and API schemas."""

import enum

from sqlalchemy import Enum


class VerificationStatus(str, enum.Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


class PrivacyLevel(str, enum.Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    RECIPIENT_ONLY = "recipient_only"


class PosterAnonymity(str, enum.Enum):
    FULL_PROFILE = "full_profile"
    FIRST_NAME_ONLY = "first_name_only"


class RecipientType(str, enum.Enum):
    REGISTERED = "registered"
    ANONYMOUS = "anonymous"


class DocumentType(str, enum.Enum):
    DRIVERS_LICENSE = "drivers_license"
    PASSPORT = "passport"
    NATIONAL_ID = "national_id"


class VerificationRequestStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class NotificationType(str, enum.Enum):
    TAGGED = "tagged"
    LIKE = "like"
    COMMENT = "comment"
    MATCH_FOUND = "match_found"
    VERIFICATION_COMPLETE = "verification_complete"


def db_enum(enum_cls: type[enum.Enum], name: str) -> Enum:
    """Return a SQLAlchemy Enum type that stores the member values."""
    return Enum(
        enum_cls,
        name=name,
        values_callable=lambda members: [member.value for member in members],
        validate_strings=True,
    )
