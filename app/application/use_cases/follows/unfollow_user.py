"""Use case for removing a follow edge."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import CurrentIdentity
from app.domain.exceptions import ConflictError, NotFoundError, ValidationError
from app.infrastructure.repositories import FollowRepository, UserRepository

logger = logging.getLogger(__name__)


def unfollow_user(session: Session, identity: CurrentIdentity, *, target_id: int) -> None:
    if identity.is_user(target_id):
        raise ConflictError("You cannot unfollow yourself")
    if not UserRepository(session).exists(target_id):
        raise NotFoundError("User not found")

    if not FollowRepository(session).delete(identity.user_id, target_id):
        raise ValidationError("You are not following this user")
    logger.info("User %s unfollowed user %s", identity.user_id, target_id)
