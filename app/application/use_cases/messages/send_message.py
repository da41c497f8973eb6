"""Use case for sending a direct message."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import CurrentIdentity, Message
from app.domain.exceptions import ConflictError, NotFoundError, ValidationError
from app.infrastructure.repositories import MessageRepository, UserRepository

logger = logging.getLogger(__name__)

MESSAGE_MAX_LENGTH = 1000


def send_message(
    session: Session,
    identity: CurrentIdentity,
    *,
    recipient_id: int,
    content: str | None,
) -> Message:
    if identity.is_user(recipient_id):
        raise ConflictError("You cannot send a message to yourself")
    if not UserRepository(session).exists(recipient_id):
        raise NotFoundError("Recipient not found")
    if content is None or not content.strip():
        raise ValidationError("Message content is required")
    if len(content) > MESSAGE_MAX_LENGTH:
        raise ValidationError(
            f"Message content cannot exceed {MESSAGE_MAX_LENGTH} characters"
        )

    message = MessageRepository(session).create(
        Message(
            id=None,
            from_user_id=identity.user_id,
            to_user_id=recipient_id,
            content=content,
        )
    )
    logger.info("User %s sent message %s to user %s", identity.user_id, message.id, recipient_id)
    return message
