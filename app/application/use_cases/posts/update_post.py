"""Use case for editing a post."""

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import CurrentIdentity, Post
from app.domain.exceptions import ForbiddenError
from app.infrastructure.repositories import PostRepository

from .get_post import get_post
from .validators import ensure_valid_post_text

logger = logging.getLogger(__name__)

_UNSET = object()


def update_post(
    session: Session,
    identity: CurrentIdentity,
    *,
    post_id: int,
    text: str | None,
    image: str | None | object = _UNSET,
) -> Post:
    """Replace the text of an owned post and optionally its image."""

    current = get_post(session, identity, post_id=post_id)
    if not identity.is_user(current.user_id):
        raise ForbiddenError("You can only update your own posts")

    updated = replace(
        current,
        text=ensure_valid_post_text(text),
        image=current.image if image is _UNSET else (image or None),
    )
    saved = PostRepository(session).update(updated, viewer_id=identity.user_id)
    logger.info("User %s updated post %s", identity.user_id, post_id)
    return saved
