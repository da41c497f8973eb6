"""Persistence helpers for post likes."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.infrastructure.models import LikeModel


class LikeRepository:
    """Record and remove likes; the (post, user) pair is unique."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def exists(self, *, post_id: int, user_id: int) -> bool:
        query = self.session.query(LikeModel.id).filter(
            LikeModel.post_id == post_id,
            LikeModel.user_id == user_id,
        )
        return self.session.query(query.exists()).scalar()

    def create(self, *, post_id: int, user_id: int) -> None:
        """Insert the like; raises ``IntegrityError`` on a duplicate pair."""

        self.session.add(LikeModel(post_id=post_id, user_id=user_id))
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise

    def delete(self, *, post_id: int, user_id: int) -> int:
        deleted = (
            self.session.query(LikeModel)
            .filter(LikeModel.post_id == post_id, LikeModel.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return deleted


__all__ = ["LikeRepository"]
