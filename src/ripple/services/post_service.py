"""Service-level helpers for creating and managing stories."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from ripple.models import (
    NotificationType,
    PosterAnonymity,
    Post,
    PrivacyLevel,
    Profile,
    RecipientType,
)
from ripple.repositories.post_repo import PostRepository
from ripple.schemas.post import AuthorSummary, PostCreate, PostResponse, PostUpdate
from ripple.services.errors import AccessDenied, NotFound, ValidationFailed
from ripple.services.matching import record_pending_match
from ripple.services.notifications import NotificationService

logger = logging.getLogger(__name__)


def create_post(db: Session, author: Profile, post_data: PostCreate) -> Post:
    """Publish a story written by ``author``.

    A registered recipient is notified with a ``tagged`` notification; an
    unregistered one leaves a pending match for later reconciliation.

    Raises:
        ValidationFailed: If ``recipient_id`` does not name an existing account.
    """
    recipient: Profile | None = None
    if post_data.recipient_id is not None:
        recipient = db.get(Profile, post_data.recipient_id)
        if recipient is None:
            raise ValidationFailed("recipient_id", "Recipient not found")

    recipient_name = post_data.recipient_name or (recipient.public_name if recipient else "")

    post = Post(
        author_id=author.id,
        author_first_name=author.first_name,
        content=post_data.content,
        recipient_type=RecipientType.REGISTERED if recipient else RecipientType.ANONYMOUS,
        recipient_id=recipient.id if recipient else None,
        recipient_name=recipient_name,
        privacy_level=post_data.privacy_level,
        poster_anonymity=post_data.poster_anonymity,
        interests=list(post_data.interests),
        like_count=0,
        comment_count=0,
        engagement_score=0.0,
    )
    db.add(post)
    db.flush()

    if recipient is None:
        record_pending_match(db, post, recipient_name, post_data.recipient_email)
    elif recipient.id != author.id:
        NotificationService.emit_for_actor(
            db,
            author,
            user_id=recipient.id,
            type_=NotificationType.TAGGED,
            message=f"You were mentioned in a story by {author.first_name or 'someone'}",
            post_id=post.id,
        )

    db.commit()
    db.refresh(post)
    logger.info("User %s published post %s (%s)", author.id, post.id, post.recipient_type.value)
    return post


def get_post_for_viewer(db: Session, post_id: int, viewer_id: int | None) -> Post:
    """Return a post the viewer may read.

    Raises:
        NotFound: If the post does not exist or is hidden from the viewer.
    """
    post = PostRepository(db).get_visible(post_id, viewer_id)
    if post is None:
        raise NotFound("Post")
    return post


def update_post(db: Session, post: Post, editor: Profile, update_data: PostUpdate) -> Post:
    """Apply author edits. The recipient override is not editable here."""
    if post.author_id is None or post.author_id != editor.id:
        raise AccessDenied(f"user {editor.id} is not the author of post {post.id}")

    for key, value in update_data.model_dump(exclude_unset=True).items():
        if value is None:
            continue
        setattr(post, key, value.strip() if key == "content" else value)

    db.commit()
    db.refresh(post)
    return post


def set_recipient_override(
    db: Session, post: Post, editor: Profile, override: PrivacyLevel | None
) -> Post:
    """Set or clear the recipient's visibility override; only the recipient may."""
    if post.recipient_id is None or post.recipient_id != editor.id:
        raise AccessDenied(f"user {editor.id} is not the recipient of post {post.id}")

    post.recipient_visibility_override = override
    db.commit()
    db.refresh(post)
    logger.info("Recipient %s set override on post %s to %s", editor.id, post.id, override)
    return post


def delete_post(db: Session, post: Post, requester: Profile) -> None:
    """Delete a post and everything hanging off it; author only."""
    if post.author_id is None or post.author_id != requester.id:
        raise AccessDenied(f"user {requester.id} is not the author of post {post.id}")
    db.delete(post)
    db.commit()
    logger.info("User %s deleted post %s", requester.id, post.id)


def to_post_response(
    post: Post,
    viewer_id: int | None,
    *,
    author: Profile | None = None,
    is_liked: bool = False,
    is_bookmarked: bool = False,
) -> PostResponse:
    """Convert a Post ORM instance to an API schema.

    With ``first_name_only`` anonymity the author's account is hidden from
    everyone except the author.
    """
    show_author = (
        post.poster_anonymity == PosterAnonymity.FULL_PROFILE
        or (viewer_id is not None and viewer_id == post.author_id)
    )
    summary: AuthorSummary | None = None
    if show_author and author is not None:
        summary = AuthorSummary(
            id=author.id,
            display_name=author.public_name,
            avatar_url=author.avatar_url,
        )

    return PostResponse(
        id=post.id,
        author_id=post.author_id if show_author else None,
        author_first_name=post.author_first_name,
        author=summary,
        content=post.content,
        recipient_type=post.recipient_type,
        recipient_id=post.recipient_id,
        recipient_name=post.recipient_name,
        privacy_level=post.privacy_level,
        recipient_visibility_override=post.recipient_visibility_override,
        poster_anonymity=post.poster_anonymity,
        interests=list(post.interests or []),
        like_count=post.like_count,
        comment_count=post.comment_count,
        engagement_score=float(post.engagement_score),
        created_at=post.created_at,
        updated_at=post.updated_at,
        is_liked=is_liked,
        is_bookmarked=is_bookmarked,
    )


def to_post_responses(db: Session, posts: list[Post], viewer_id: int | None) -> list[PostResponse]:
    """Serialize a page of posts with the viewer's like/bookmark flags."""
    repo = PostRepository(db)
    post_ids = [post.id for post in posts]
    liked: set[int] = set()
    bookmarked: set[int] = set()
    if viewer_id is not None:
        liked = repo.liked_post_ids(viewer_id, post_ids)
        bookmarked = repo.bookmarked_post_ids(viewer_id, post_ids)

    author_ids = {post.author_id for post in posts if post.author_id is not None}
    authors = {
        profile.id: profile
        for profile in (db.get(Profile, author_id) for author_id in author_ids)
        if profile is not None
    }
    return [
        to_post_response(
            post,
            viewer_id,
            author=authors.get(post.author_id) if post.author_id is not None else None,
            is_liked=post.id in liked,
            is_bookmarked=post.id in bookmarked,
        )
        for post in posts
    ]
