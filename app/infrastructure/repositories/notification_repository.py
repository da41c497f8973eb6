"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import Notification, NotificationType, UserSummary
from app.infrastructure.models import NotificationModel
from app.utils import ensure_utc, ensure_utc_naive, now_utc_naive


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: int,
        *,
        unread_only: bool = False,
        offset: int = 0,
        limit: int = 20,
    ) -> Sequence[Notification]:
        query = self._base_query(user_id, unread_only=unread_only).order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        query = query.offset(offset).limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_for_user(self, user_id: int, *, unread_only: bool = False) -> int:
        query = self.session.query(func.count(NotificationModel.id)).filter(
            NotificationModel.to_user_id == user_id
        )
        if unread_only:
            query = query.filter(NotificationModel.is_read.is_(False))
        return query.scalar() or 0

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            type=NotificationType(notification.type).value,
            from_user_id=notification.from_user_id,
            to_user_id=notification.to_user_id,
            post_id=notification.post_id,
            body=notification.body,
            is_read=notification.is_read,
            created_at=ensure_utc_naive(notification.created_at) or now_utc_naive(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_ids: Iterable[int], *, user_id: int) -> int:
        """Mark the given notifications read; ids addressed to others are ignored."""

        ids = [notification_id for notification_id in notification_ids if notification_id is not None]
        if not ids:
            return 0
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id.in_(ids),
                NotificationModel.to_user_id == user_id,
                NotificationModel.is_read.is_(False),
            )
            .update({NotificationModel.is_read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    def mark_all_as_read(self, *, user_id: int) -> int:
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.to_user_id == user_id,
                NotificationModel.is_read.is_(False),
            )
            .update({NotificationModel.is_read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    def _base_query(self, user_id: int, *, unread_only: bool):
        query = self.session.query(NotificationModel).filter(
            NotificationModel.to_user_id == user_id
        )
        if unread_only:
            query = query.filter(NotificationModel.is_read.is_(False))
        return query

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        actor = None
        if model.from_user is not None:
            actor = UserSummary(
                id=model.from_user.id,
                name=model.from_user.name,
                username=model.from_user.username,
                image=model.from_user.image,
            )
        return Notification(
            id=model.id,
            type=NotificationType(model.type),
            from_user_id=model.from_user_id,
            to_user_id=model.to_user_id,
            post_id=model.post_id,
            body=model.body,
            is_read=bool(model.is_read),
            created_at=ensure_utc(model.created_at),
            actor=actor,
        )


__all__ = ["NotificationRepository"]
