"""Use case for acknowledging notifications."""

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import CurrentIdentity
from app.domain.exceptions import ValidationError
from app.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)


def mark_notifications_read(
    session: Session,
    identity: CurrentIdentity,
    *,
    ids: Sequence[int] | None = None,
    mark_all: bool = False,
) -> int:
    """Mark notifications addressed to the caller as read.

    Returns the number of rows that changed. Identifiers belonging to other
    users are ignored.
    """

    repository = NotificationRepository(session)
    if mark_all:
        updated = repository.mark_all_as_read(user_id=identity.user_id)
    elif ids:
        updated = repository.mark_as_read(ids, user_id=identity.user_id)
    else:
        raise ValidationError("Notification IDs are required unless marking all as read")

    logger.info("Marked %s notifications read for user %s", updated, identity.user_id)
    return updated
