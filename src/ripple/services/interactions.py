"""Likes, bookmarks and comments.

Each like or comment insert/delete refreshes the parent post's derived
engagement columns before the transaction commits, and emits the author
notification in that same transaction.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ripple.models import Bookmark, Comment, NotificationType, Post, PostLike, Profile
from ripple.services.engagement import record_child_change
from ripple.services.errors import AccessDenied, Conflict, NotFound, ValidationFailed
from ripple.services.notifications import NotificationService

logger = logging.getLogger(__name__)


def _actor_label(actor: Profile) -> str:
    return actor.first_name or "Someone"


def like_post(db: Session, post: Post, user: Profile) -> Post:
    """Like a post the user can see.

    Raises:
        Conflict: If the user already liked the post.
    """
    like = PostLike(post_id=post.id, user_id=user.id)
    db.add(like)
    try:
        db.flush()
    except IntegrityError as err:
        db.rollback()
        raise Conflict("You already liked this story") from err
    refreshed = record_child_change(db, "insert", new_row=like)

    if post.author_id is not None and post.author_id != user.id:
        NotificationService.emit_system(
            db,
            user_id=post.author_id,
            type_=NotificationType.LIKE,
            message=f"{_actor_label(user)} liked your story",
            post_id=post.id,
            triggering_user_id=user.id,
        )

    db.commit()
    logger.info("User %s liked post %s", user.id, post.id)
    return refreshed or post


def unlike_post(db: Session, post: Post, user: Profile) -> Post:
    """Remove the user's like.

    Raises:
        NotFound: If the user had not liked the post.
    """
    like = db.scalars(
        select(PostLike).where(PostLike.post_id == post.id, PostLike.user_id == user.id)
    ).first()
    if like is None:
        raise NotFound("Like")

    db.delete(like)
    refreshed = record_child_change(db, "delete", old_row=like)
    db.commit()
    logger.info("User %s unliked post %s", user.id, post.id)
    return refreshed or post


def add_bookmark(db: Session, post: Post, user: Profile) -> Bookmark:
    """Save a post for later.

    Raises:
        Conflict: If the post is already saved.
    """
    bookmark = Bookmark(post_id=post.id, user_id=user.id)
    db.add(bookmark)
    try:
        db.commit()
    except IntegrityError as err:
        db.rollback()
        raise Conflict("Story already saved") from err
    db.refresh(bookmark)
    return bookmark


def remove_bookmark(db: Session, post_id: int, user: Profile) -> None:
    """Drop a saved post; works even if the post is no longer visible."""
    bookmark = db.scalars(
        select(Bookmark).where(Bookmark.post_id == post_id, Bookmark.user_id == user.id)
    ).first()
    if bookmark is None:
        raise NotFound("Bookmark")
    db.delete(bookmark)
    db.commit()


def list_comments(db: Session, post: Post) -> list[Comment]:
    """Return a post's comments in posting order."""
    stmt = select(Comment).where(Comment.post_id == post.id).order_by(Comment.id)
    return list(db.scalars(stmt))


def add_comment(
    db: Session,
    post: Post,
    author: Profile,
    content: str,
    parent_comment_id: int | None = None,
) -> Comment:
    """Comment on a post or reply to one of its comments.

    Raises:
        ValidationFailed: If the parent comment belongs to a different post.
    """
    if parent_comment_id is not None:
        parent = db.get(Comment, parent_comment_id)
        if parent is None or parent.post_id != post.id:
            raise ValidationFailed("parent_comment_id", "Reply must target a comment on this story")

    comment = Comment(
        post_id=post.id,
        author_id=author.id,
        parent_comment_id=parent_comment_id,
        content=content,
    )
    db.add(comment)
    record_child_change(db, "insert", new_row=comment)

    if post.author_id is not None and post.author_id != author.id:
        NotificationService.emit_system(
            db,
            user_id=post.author_id,
            type_=NotificationType.COMMENT,
            message=f"{_actor_label(author)} commented on your story",
            post_id=post.id,
            triggering_user_id=author.id,
        )

    db.commit()
    db.refresh(comment)
    logger.info("User %s commented on post %s", author.id, post.id)
    return comment


def _own_comment(db: Session, comment_id: int, user: Profile) -> Comment:
    comment = db.get(Comment, comment_id)
    if comment is None:
        raise NotFound("Comment")
    if comment.author_id != user.id:
        raise AccessDenied(f"user {user.id} does not own comment {comment_id}")
    return comment


def update_comment(db: Session, comment_id: int, user: Profile, content: str) -> Comment:
    """Edit the text of the caller's own comment."""
    comment = _own_comment(db, comment_id, user)
    text = content.strip()
    if not text:
        raise ValidationFailed("content", "Comment cannot be empty")
    comment.content = text
    db.commit()
    db.refresh(comment)
    return comment


def delete_comment(db: Session, comment_id: int, user: Profile) -> None:
    """Delete the caller's own comment together with its replies."""
    comment = _own_comment(db, comment_id, user)
    db.delete(comment)
    record_child_change(db, "delete", old_row=comment)
    db.commit()
    logger.info("User %s deleted comment %s", user.id, comment_id)
