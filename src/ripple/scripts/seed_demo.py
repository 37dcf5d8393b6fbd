# src/ripple/scripts/seed_demo.py
"""Load sample stories into the configured database for demos."""
from __future__ import annotations

import argparse
import sys
from datetime import timedelta

from sqlalchemy import select

from ripple.db.session import SessionLocal, create_tables
from ripple.db.time import utcnow
from ripple.models import PosterAnonymity, Post, PrivacyLevel, RecipientType
from ripple.services.engagement import compute_engagement_score
from ripple.services.matching import record_pending_match

# (author first name, recipient name, anonymity, interests, hours ago, story)
DEMO_STORIES: list[tuple[str, str, PosterAnonymity, list[str], int, str]] = [
    (
        "Sarah",
        "The kind stranger at Whole Foods",
        PosterAnonymity.FIRST_NAME_ONLY,
        ["kindness", "community"],
        2,
        "I witnessed an incredible act of kindness today. A stranger helped an elderly "
        "woman carry her groceries all the way to her apartment, even though it was "
        "raining. He didn't ask for anything in return.",
    ),
    (
        "Michael",
        "Mrs. Rodriguez",
        PosterAnonymity.FULL_PROFILE,
        ["education", "mentorship", "gratitude"],
        5,
        "My teacher Mrs. Rodriguez stayed after school for months to help me understand "
        "math. Because of her patience I not only passed but started to love the subject.",
    ),
    (
        "Emma",
        "My neighbor on Oak Street",
        PosterAnonymity.FIRST_NAME_ONLY,
        ["kindness", "support", "community"],
        24,
        "When I lost my job, my neighbor started leaving groceries at my door with "
        "anonymous notes of encouragement. That kindness gave me hope when I had none.",
    ),
    (
        "David",
        "Jessica Chen",
        PosterAnonymity.FULL_PROFILE,
        ["family", "support", "love"],
        48,
        "My sister has been my rock through everything. When I came out to my family, "
        "she was the first one to hug me and tell me nothing had changed.",
    ),
    (
        "Rachel",
        "Coffee shop stranger",
        PosterAnonymity.FIRST_NAME_ONLY,
        ["kindness", "pay-it-forward"],
        6,
        "A complete stranger paid for my coffee today when my card was declined. Such a "
        "small gesture, but it completely turned my day around.",
    ),
    (
        "James",
        "Coach Martinez",
        PosterAnonymity.FULL_PROFILE,
        ["mentorship", "sports", "education"],
        72,
        "My coach believed in me when no one else did. Because of his guidance I earned "
        "a scholarship and became the first in my family to go to college.",
    ),
    (
        "Lisa",
        "Amanda",
        PosterAnonymity.FIRST_NAME_ONLY,
        ["friendship", "support"],
        12,
        "My best friend drove six hours when I called her crying at 2 AM. She didn't ask "
        "questions, she just came.",
    ),
    (
        "Tom",
        "Firefighter Station 12",
        PosterAnonymity.FULL_PROFILE,
        ["heroes", "kindness", "community"],
        8,
        "I saw a firefighter comfort a scared child during an evacuation. He sat down at "
        "the kid's level and talked about fire trucks until he was smiling.",
    ),
]


def seed(*, force: bool = False) -> int:
    """Insert the demo stories; return how many were added."""
    create_tables()
    with SessionLocal() as db:
        if not force and db.scalars(select(Post.id).limit(1)).first() is not None:
            return 0

        now = utcnow()
        for first_name, recipient, anonymity, interests, hours_ago, content in DEMO_STORIES:
            created_at = now - timedelta(hours=hours_ago)
            post = Post(
                author_id=None,
                author_first_name=first_name,
                content=content,
                recipient_type=RecipientType.ANONYMOUS,
                recipient_name=recipient,
                privacy_level=PrivacyLevel.PUBLIC,
                poster_anonymity=anonymity,
                interests=interests,
                like_count=0,
                comment_count=0,
                engagement_score=compute_engagement_score(0, 0, created_at, now),
                created_at=created_at,
            )
            db.add(post)
            db.flush()
            record_pending_match(db, post, recipient)
        db.commit()
    return len(DEMO_STORIES)


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the database with demo stories")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Insert the stories even if posts already exist",
    )
    args = parser.parse_args()

    try:
        added = seed(force=args.force)
    except Exception as exc:
        print(f"[seed_demo] ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    if added:
        print(f"[seed_demo] inserted {added} demo stories")
    else:
        print("[seed_demo] posts already present; use --force to add the demo set again")


if __name__ == "__main__":
    main()
