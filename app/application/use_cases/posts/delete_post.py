"""Use case for deleting a post along with its likes and comments."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import CurrentIdentity
from app.domain.exceptions import ForbiddenError, NotFoundError
from app.infrastructure.repositories import PostRepository

logger = logging.getLogger(__name__)


def delete_post(session: Session, identity: CurrentIdentity, *, post_id: int) -> None:
    repository = PostRepository(session)
    owner_id = repository.get_owner_id(post_id)
    if owner_id is None:
        raise NotFoundError("Post not found")
    if not identity.is_user(owner_id):
        raise ForbiddenError("You can only delete your own posts")

    repository.delete(post_id)
    logger.info("User %s deleted post %s", identity.user_id, post_id)
