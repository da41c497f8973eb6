"""Use case for publishing a post."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import CurrentIdentity, Post
from app.infrastructure.repositories import PostRepository

from .validators import ensure_valid_post_text

logger = logging.getLogger(__name__)


def create_post(
    session: Session,
    identity: CurrentIdentity,
    *,
    text: str | None,
    image: str | None = None,
) -> Post:
    post = Post(
        id=None,
        user_id=identity.user_id,
        text=ensure_valid_post_text(text),
        image=image or None,
        created_at=None,
        updated_at=None,
    )
    saved = PostRepository(session).create(post)
    logger.info("User %s created post %s", identity.user_id, saved.id)
    return saved
