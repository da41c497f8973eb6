"""Routes for the notification inbox."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    count_unread_notifications as count_unread_notifications_uc,
    list_notifications as list_notifications_uc,
    mark_notifications_read as mark_notifications_read_uc,
)
from app.domain.entities import CurrentIdentity, Notification, NotificationType
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_identity
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import (
    NotificationCommentRead,
    NotificationMarkRead,
    NotificationMarkReadResponse,
    NotificationPage,
    NotificationPostRead,
    NotificationRead,
    UnreadCountRead,
    UserSummaryRead,
)

router = APIRouter(prefix="/users/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    comment = None
    if notification.type == NotificationType.COMMENT and notification.body:
        comment = NotificationCommentRead(content=notification.body)
    return NotificationRead(
        id=notification.id or 0,
        type=NotificationType(notification.type).value,
        created_at=notification.created_at,
        is_read=notification.is_read,
        actor=(
            UserSummaryRead.model_validate(notification.actor)
            if notification.actor
            else None
        ),
        post=(
            NotificationPostRead.model_validate(notification.post)
            if notification.post
            else None
        ),
        comment=comment,
    )


@router.get("", response_model=NotificationPage)
def list_notifications(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    unread_only: bool = Query(default=False, alias="unreadOnly"),
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Return the caller's notifications, newest first."""

    result = list_notifications_uc(
        db, identity, page=page, limit=limit, unread_only=unread_only
    )
    return NotificationPage(
        items=[_notification_to_schema(item) for item in result.items],
        total_count=result.total_count,
        has_more=result.has_more,
        page=page,
        limit=limit,
    )


@router.patch("", response_model=NotificationMarkReadResponse)
def mark_notifications_read(
    payload: NotificationMarkRead,
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    try:
        updated = mark_notifications_read_uc(
            db, identity, ids=payload.ids, mark_all=payload.mark_all
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return NotificationMarkReadResponse(
        message="Notifications marked as read", updated=updated
    )


@router.get("/unread-count", response_model=UnreadCountRead)
def read_unread_count(
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    return UnreadCountRead(count=count_unread_notifications_uc(db, identity))
