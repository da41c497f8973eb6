"""Use case for following another user."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import notify_follow
from app.domain.entities import CurrentIdentity, Follow
from app.domain.exceptions import ConflictError, NotFoundError
from app.infrastructure.repositories import FollowRepository, UserRepository

logger = logging.getLogger(__name__)

ALREADY_FOLLOWING_MESSAGE = "You are already following this user"


def follow_user(session: Session, identity: CurrentIdentity, *, target_id: int) -> Follow:
    """Create the edge caller -> ``target_id`` and notify the target."""

    if identity.is_user(target_id):
        raise ConflictError("You cannot follow yourself")
    if not UserRepository(session).exists(target_id):
        raise NotFoundError("User not found")

    repository = FollowRepository(session)
    if repository.exists(identity.user_id, target_id):
        raise ConflictError(ALREADY_FOLLOWING_MESSAGE)
    try:
        follow = repository.create(identity.user_id, target_id)
    except IntegrityError as exc:
        raise ConflictError(ALREADY_FOLLOWING_MESSAGE) from exc

    logger.info("User %s followed user %s", identity.user_id, target_id)
    notify_follow(session, follower_id=identity.user_id, followed_id=target_id)
    return follow
