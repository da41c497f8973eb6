"""Use cases for liking and unliking posts."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import notify_like
from app.domain.entities import CurrentIdentity
from app.domain.exceptions import ConflictError, NotFoundError
from app.infrastructure.repositories import LikeRepository, PostRepository

logger = logging.getLogger(__name__)

ALREADY_LIKED_MESSAGE = "You have already liked this post"


def _require_owner_id(session: Session, post_id: int) -> int:
    owner_id = PostRepository(session).get_owner_id(post_id)
    if owner_id is None:
        raise NotFoundError("Post not found")
    return owner_id


def like_post(session: Session, identity: CurrentIdentity, *, post_id: int) -> None:
    """Record the caller's like and notify the post owner."""

    owner_id = _require_owner_id(session, post_id)
    repository = LikeRepository(session)
    if repository.exists(post_id=post_id, user_id=identity.user_id):
        raise ConflictError(ALREADY_LIKED_MESSAGE)
    try:
        repository.create(post_id=post_id, user_id=identity.user_id)
    except IntegrityError as exc:
        raise ConflictError(ALREADY_LIKED_MESSAGE) from exc

    logger.info("User %s liked post %s", identity.user_id, post_id)
    notify_like(session, liker_id=identity.user_id, post_owner_id=owner_id, post_id=post_id)


def unlike_post(session: Session, identity: CurrentIdentity, *, post_id: int) -> bool:
    """Remove the caller's like; returns ``False`` when there was none."""

    _require_owner_id(session, post_id)
    removed = LikeRepository(session).delete(post_id=post_id, user_id=identity.user_id)
    if removed:
        logger.info("User %s unliked post %s", identity.user_id, post_id)
    return removed > 0
