"""Use case for reading the caller's notification inbox."""

from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import CurrentIdentity, Notification, PaginatedResult
from app.infrastructure.repositories import NotificationRepository, PostRepository
from app.utils import page_to_offset


def list_notifications(
    session: Session,
    identity: CurrentIdentity,
    *,
    page: int = 1,
    limit: int = 20,
    unread_only: bool = False,
) -> PaginatedResult[Notification]:
    """Return a page of notifications, newest first, with post excerpts attached.

    Referenced posts are resolved with a single lookup for the whole page; a
    post deleted since the notification was created is reported as ``None``.
    """

    repository = NotificationRepository(session)
    offset = page_to_offset(page, limit)
    notifications = repository.list_for_user(
        identity.user_id, unread_only=unread_only, offset=offset, limit=limit
    )
    excerpts = PostRepository(session).get_excerpts(
        notification.post_id
        for notification in notifications
        if notification.references_post()
    )
    items = [
        replace(
            notification,
            post=excerpts.get(notification.post_id) if notification.references_post() else None,
        )
        for notification in notifications
    ]
    return PaginatedResult(
        items=items,
        total_count=repository.count_for_user(identity.user_id, unread_only=unread_only),
        offset=offset,
    )


def count_unread_notifications(session: Session, identity: CurrentIdentity) -> int:
    return NotificationRepository(session).count_for_user(identity.user_id, unread_only=True)
