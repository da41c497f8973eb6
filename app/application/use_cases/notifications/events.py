"""Helpers that record notifications for social interactions."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Notification, NotificationType
from app.infrastructure.repositories import NotificationRepository
from app.utils import now_utc

logger = logging.getLogger(__name__)

COMMENT_EXCERPT_LENGTH = 100


def _persist_notification(
    session: Session,
    *,
    notification_type: NotificationType,
    from_user_id: int,
    to_user_id: int,
    post_id: int | None = None,
    body: str | None = None,
) -> Notification:
    notification = Notification(
        id=None,
        type=notification_type,
        from_user_id=from_user_id,
        to_user_id=to_user_id,
        post_id=post_id,
        body=body,
        is_read=False,
        created_at=now_utc(),
    )
    saved = NotificationRepository(session).create(notification)
    logger.info(
        "Created %s notification %s for user %s",
        notification_type.value,
        saved.id,
        to_user_id,
    )
    return saved


def notify_follow(session: Session, *, follower_id: int, followed_id: int) -> Notification:
    return _persist_notification(
        session,
        notification_type=NotificationType.FOLLOW,
        from_user_id=follower_id,
        to_user_id=followed_id,
    )


def notify_like(
    session: Session, *, liker_id: int, post_owner_id: int, post_id: int
) -> Notification | None:
    """Notify the post owner of a like; self-likes produce nothing."""

    if liker_id == post_owner_id:
        return None
    return _persist_notification(
        session,
        notification_type=NotificationType.LIKE,
        from_user_id=liker_id,
        to_user_id=post_owner_id,
        post_id=post_id,
    )


def notify_comment(
    session: Session,
    *,
    commenter_id: int,
    post_owner_id: int,
    post_id: int,
    text: str,
) -> Notification | None:
    """Notify the post owner of a comment, keeping an excerpt as the body."""

    if commenter_id == post_owner_id:
        return None
    return _persist_notification(
        session,
        notification_type=NotificationType.COMMENT,
        from_user_id=commenter_id,
        to_user_id=post_owner_id,
        post_id=post_id,
        body=text[:COMMENT_EXCERPT_LENGTH],
    )
