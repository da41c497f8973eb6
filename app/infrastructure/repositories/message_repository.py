"""Persistence layer for direct messages and conversation aggregates."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import and_, case, func, or_
from sqlalchemy.orm import Session

from app.domain.entities import Message, UserSummary
from app.infrastructure.models import MessageModel
from app.utils import ensure_utc


class MessageRepository:
    """Store messages and answer thread and conversation queries."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, message: Message) -> Message:
        model = MessageModel(
            from_user_id=message.from_user_id,
            to_user_id=message.to_user_id,
            content=message.content,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_between(
        self,
        user_id: int,
        other_user_id: int,
        *,
        offset: int = 0,
        limit: int = 20,
    ) -> Sequence[Message]:
        query = (
            self.session.query(MessageModel)
            .filter(
                or_(
                    and_(
                        MessageModel.from_user_id == user_id,
                        MessageModel.to_user_id == other_user_id,
                    ),
                    and_(
                        MessageModel.from_user_id == other_user_id,
                        MessageModel.to_user_id == user_id,
                    ),
                )
            )
            .order_by(MessageModel.created_at.desc(), MessageModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def mark_read_from(self, *, from_user_id: int, to_user_id: int) -> int:
        """Mark every unread message from ``from_user_id`` to ``to_user_id`` read."""

        updated = (
            self.session.query(MessageModel)
            .filter(
                MessageModel.from_user_id == from_user_id,
                MessageModel.to_user_id == to_user_id,
                MessageModel.is_read.is_(False),
            )
            .update({MessageModel.is_read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    def aggregate_conversations(self, user_id: int) -> list[tuple[int, datetime, int]]:
        """Return ``(counterpart_id, last_message_at, unread_count)`` rows.

        Messages are grouped by the participant that is not ``user_id``;
        unread counts only include messages addressed to ``user_id``.
        Rows are ordered by last activity, most recent first.
        """

        exchanged = (
            self.session.query(
                case(
                    (MessageModel.from_user_id == user_id, MessageModel.to_user_id),
                    else_=MessageModel.from_user_id,
                ).label("counterpart_id"),
                MessageModel.created_at.label("created_at"),
                case(
                    (
                        and_(
                            MessageModel.to_user_id == user_id,
                            MessageModel.is_read.is_(False),
                        ),
                        1,
                    ),
                    else_=0,
                ).label("unread"),
            )
            .filter(
                or_(
                    MessageModel.from_user_id == user_id,
                    MessageModel.to_user_id == user_id,
                ),
                MessageModel.from_user_id != MessageModel.to_user_id,
            )
            .subquery()
        )
        last_message_at = func.max(exchanged.c.created_at).label("last_message_at")
        query = (
            self.session.query(
                exchanged.c.counterpart_id,
                last_message_at,
                func.sum(exchanged.c.unread).label("unread_count"),
            )
            .group_by(exchanged.c.counterpart_id)
            .order_by(last_message_at.desc())
        )
        return [
            (int(counterpart_id), ensure_utc(last_at), int(unread or 0))
            for counterpart_id, last_at, unread in query.all()
        ]

    @staticmethod
    def _to_entity(model: MessageModel) -> Message:
        sender = None
        if model.from_user is not None:
            sender = UserSummary(
                id=model.from_user.id,
                name=model.from_user.name,
                username=model.from_user.username,
                image=model.from_user.image,
            )
        return Message(
            id=model.id,
            from_user_id=model.from_user_id,
            to_user_id=model.to_user_id,
            content=model.content,
            is_read=bool(model.is_read),
            created_at=ensure_utc(model.created_at),
            sender=sender,
        )


__all__ = ["MessageRepository"]
