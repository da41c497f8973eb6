"""Use case for reading the messages exchanged with one user."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import CurrentIdentity, Message
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import MessageRepository, UserRepository
from app.utils import page_to_offset

logger = logging.getLogger(__name__)


def get_thread(
    session: Session,
    identity: CurrentIdentity,
    *,
    other_user_id: int,
    page: int = 1,
    limit: int = 20,
) -> list[Message]:
    """Return the thread newest first and mark the counterpart's messages read.

    The returned page reflects read state as it was before this call.
    """

    if not UserRepository(session).exists(other_user_id):
        raise NotFoundError("User not found")

    repository = MessageRepository(session)
    messages = list(
        repository.list_between(
            identity.user_id,
            other_user_id,
            offset=page_to_offset(page, limit),
            limit=limit,
        )
    )
    updated = repository.mark_read_from(from_user_id=other_user_id, to_user_id=identity.user_id)
    if updated:
        logger.info(
            "Marked %s messages from user %s read for user %s",
            updated,
            other_user_id,
            identity.user_id,
        )
    return messages
