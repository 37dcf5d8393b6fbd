"""Who may read a story.

The effective privacy level of a post is the recipient's override when one is
set, otherwise the author's ``privacy_level``. The rule exists twice: as a
pure predicate (:func:`can_view`) for checks on loaded rows, and as a SQL
expression (:func:`visible_to`) used as the ``WHERE`` clause of every post
query.

A ``private`` level behaves differently depending on who set it: from
``privacy_level`` it admits only the author, from the override it admits the
author or the recipient.
"""

from __future__ import annotations

from sqlalchemy import and_, or_
from sqlalchemy.sql.elements import ColumnElement

from ripple.models import Post, PrivacyLevel


def effective_privacy(post: Post) -> PrivacyLevel:
    """Return the privacy level that governs visibility of ``post``."""
    if post.recipient_visibility_override is not None:
        return PrivacyLevel(post.recipient_visibility_override)
    return PrivacyLevel(post.privacy_level)


def can_view(post: Post, viewer_id: int | None) -> bool:
    """Return True if ``viewer_id`` (None for anonymous readers) may see ``post``."""
    override = post.recipient_visibility_override
    level = effective_privacy(post)

    if level is PrivacyLevel.PUBLIC:
        return True
    if viewer_id is None:
        return False

    is_author = post.author_id is not None and post.author_id == viewer_id
    is_recipient = post.recipient_id is not None and post.recipient_id == viewer_id

    if level is PrivacyLevel.RECIPIENT_ONLY:
        return is_author or is_recipient
    if level is PrivacyLevel.PRIVATE:
        if override is not None:
            return is_author or is_recipient
        return is_author
    return False


def visible_to(viewer_id: int | None) -> ColumnElement[bool]:
    """Return a SQL predicate over ``Post`` equivalent to :func:`can_view`."""
    override = Post.recipient_visibility_override
    privacy = Post.privacy_level

    override_public = override == PrivacyLevel.PUBLIC
    base_public = and_(override.is_(None), privacy == PrivacyLevel.PUBLIC)
    if viewer_id is None:
        return or_(override_public, base_public)

    is_author = Post.author_id == viewer_id
    is_recipient = Post.recipient_id == viewer_id
    author_or_recipient = or_(is_author, is_recipient)

    override_rule = or_(
        override_public,
        and_(
            override.in_([PrivacyLevel.RECIPIENT_ONLY, PrivacyLevel.PRIVATE]),
            author_or_recipient,
        ),
    )
    base_rule = and_(
        override.is_(None),
        or_(
            privacy == PrivacyLevel.PUBLIC,
            and_(privacy == PrivacyLevel.RECIPIENT_ONLY, author_or_recipient),
            and_(privacy == PrivacyLevel.PRIVATE, is_author),
        ),
    )
    return or_(and_(override.is_not(None), override_rule), base_rule)
