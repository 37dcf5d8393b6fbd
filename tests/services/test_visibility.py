"""Tests for the story visibility rules."""

from __future__ import annotations

import itertools

import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from ripple.models import Post, PosterAnonymity, PrivacyLevel, Profile, RecipientType
from ripple.services.visibility import can_view, effective_privacy, visible_to

AUTHOR = 1
RECIPIENT = 2
STRANGER = 3

PUBLIC = PrivacyLevel.PUBLIC
PRIVATE = PrivacyLevel.PRIVATE
RECIPIENT_ONLY = PrivacyLevel.RECIPIENT_ONLY


def _post(privacy: PrivacyLevel, override: PrivacyLevel | None = None) -> Post:
    return Post(
        author_id=AUTHOR,
        author_first_name="Ana",
        content="story",
        recipient_type=RecipientType.REGISTERED,
        recipient_id=RECIPIENT,
        recipient_name="Ben",
        privacy_level=privacy,
        recipient_visibility_override=override,
        poster_anonymity=PosterAnonymity.FULL_PROFILE,
        interests=[],
    )


# (privacy_level, override, viewer, expected)
VISIBILITY_TABLE = [
    (PUBLIC, None, None, True),
    (PUBLIC, None, STRANGER, True),
    (PRIVATE, None, AUTHOR, True),
    (PRIVATE, None, RECIPIENT, False),
    (PRIVATE, None, STRANGER, False),
    (PRIVATE, None, None, False),
    (RECIPIENT_ONLY, None, AUTHOR, True),
    (RECIPIENT_ONLY, None, RECIPIENT, True),
    (RECIPIENT_ONLY, None, STRANGER, False),
    (RECIPIENT_ONLY, None, None, False),
    # Override wins over the author's choice in both directions.
    (PRIVATE, PUBLIC, STRANGER, True),
    (PRIVATE, PUBLIC, None, True),
    (PUBLIC, RECIPIENT_ONLY, STRANGER, False),
    (PUBLIC, RECIPIENT_ONLY, RECIPIENT, True),
    (PUBLIC, RECIPIENT_ONLY, AUTHOR, True),
    # Private set through the override admits the recipient too.
    (PUBLIC, PRIVATE, RECIPIENT, True),
    (PUBLIC, PRIVATE, AUTHOR, True),
    (PUBLIC, PRIVATE, STRANGER, False),
    (PUBLIC, PRIVATE, None, False),
]


@pytest.mark.parametrize(("privacy", "override", "viewer", "expected"), VISIBILITY_TABLE)
def test_can_view_table(
    privacy: PrivacyLevel,
    override: PrivacyLevel | None,
    viewer: int | None,
    expected: bool,
) -> None:
    assert can_view(_post(privacy, override), viewer) is expected


def test_effective_privacy_prefers_override() -> None:
    assert effective_privacy(_post(PUBLIC)) is PUBLIC
    assert effective_privacy(_post(PUBLIC, RECIPIENT_ONLY)) is RECIPIENT_ONLY
    assert effective_privacy(_post(PRIVATE, PUBLIC)) is PUBLIC


def test_private_post_hidden_from_recipient_unless_overridden() -> None:
    post = _post(PRIVATE)
    assert not can_view(post, RECIPIENT)
    post.recipient_visibility_override = PRIVATE
    assert can_view(post, RECIPIENT)


def test_post_without_recipient_is_author_only_when_restricted() -> None:
    post = _post(RECIPIENT_ONLY)
    post.recipient_id = None
    assert can_view(post, AUTHOR)
    assert not can_view(post, RECIPIENT)


def test_sql_predicate_matches_python_predicate(db_session: Session) -> None:
    author = Profile(email="ana@example.com", password_hash="x", first_name="Ana")
    recipient = Profile(email="ben@example.com", password_hash="x", first_name="Ben")
    stranger = Profile(email="cy@example.com", password_hash="x", first_name="Cy")
    db_session.add_all([author, recipient, stranger])
    db_session.flush()

    overrides: list[PrivacyLevel | None] = [None, *PrivacyLevel]
    for privacy, override in itertools.product(PrivacyLevel, overrides):
        db_session.add(
            Post(
                author_id=author.id,
                author_first_name="Ana",
                content=f"{privacy.value}/{override}",
                recipient_type=RecipientType.REGISTERED,
                recipient_id=recipient.id,
                recipient_name="Ben",
                privacy_level=privacy,
                recipient_visibility_override=override,
                poster_anonymity=PosterAnonymity.FULL_PROFILE,
                interests=[],
            )
        )
    db_session.flush()

    posts = list(db_session.scalars(select(Post)))
    for viewer in (None, author.id, recipient.id, stranger.id):
        expected = {post.id for post in posts if can_view(post, viewer)}
        actual = set(db_session.scalars(select(Post.id).where(visible_to(viewer))))
        assert actual == expected, f"viewer={viewer}"
