"""Persistence layer for the follow graph."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import Follow, User
from app.infrastructure.models import FollowModel
from app.utils import ensure_utc

from .user_repository import UserRepository


class FollowRepository:
    """Create, delete and enumerate directed follow edges."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def exists(self, follower_id: int, following_id: int) -> bool:
        query = self.session.query(FollowModel.id).filter(
            FollowModel.follower_id == follower_id,
            FollowModel.following_id == following_id,
        )
        return self.session.query(query.exists()).scalar()

    def create(self, follower_id: int, following_id: int) -> Follow:
        """Insert the edge; raises ``IntegrityError`` when it already exists."""

        model = FollowModel(follower_id=follower_id, following_id=following_id)
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, follower_id: int, following_id: int) -> bool:
        deleted = (
            self.session.query(FollowModel)
            .filter(
                FollowModel.follower_id == follower_id,
                FollowModel.following_id == following_id,
            )
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return deleted > 0

    def list_following_ids(self, user_id: int) -> list[int]:
        query = (
            self.session.query(FollowModel.following_id)
            .filter(FollowModel.follower_id == user_id)
            .order_by(FollowModel.id.asc())
        )
        return [following_id for (following_id,) in query.all()]

    def list_followers(
        self, user_id: int, *, offset: int = 0, limit: int = 20
    ) -> list[tuple[User, datetime | None]]:
        """Return the users following ``user_id`` with the edge timestamp."""

        query = (
            self.session.query(FollowModel)
            .filter(FollowModel.following_id == user_id)
            .order_by(FollowModel.created_at.desc(), FollowModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return [
            (UserRepository._to_entity(model.follower), ensure_utc(model.created_at))
            for model in query.all()
        ]

    def list_following(
        self, user_id: int, *, offset: int = 0, limit: int = 20
    ) -> list[tuple[User, datetime | None]]:
        """Return the users followed by ``user_id`` with the edge timestamp."""

        query = (
            self.session.query(FollowModel)
            .filter(FollowModel.follower_id == user_id)
            .order_by(FollowModel.created_at.desc(), FollowModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return [
            (UserRepository._to_entity(model.following), ensure_utc(model.created_at))
            for model in query.all()
        ]

    def filter_followed(self, follower_id: int, candidate_ids: Iterable[int]) -> set[int]:
        """Return the subset of ``candidate_ids`` that ``follower_id`` follows."""

        ids = {int(candidate_id) for candidate_id in candidate_ids}
        if not ids:
            return set()
        query = self.session.query(FollowModel.following_id).filter(
            FollowModel.follower_id == follower_id,
            FollowModel.following_id.in_(ids),
        )
        return {following_id for (following_id,) in query.all()}

    def count_followers(self, user_id: int) -> int:
        return (
            self.session.query(func.count(FollowModel.id))
            .filter(FollowModel.following_id == user_id)
            .scalar()
            or 0
        )

    def count_following(self, user_id: int) -> int:
        return (
            self.session.query(func.count(FollowModel.id))
            .filter(FollowModel.follower_id == user_id)
            .scalar()
            or 0
        )

    def follower_counts(self, user_ids: Sequence[int]) -> dict[int, int]:
        if not user_ids:
            return {}
        query = (
            self.session.query(FollowModel.following_id, func.count(FollowModel.id))
            .filter(FollowModel.following_id.in_(set(user_ids)))
            .group_by(FollowModel.following_id)
        )
        counts = {int(user_id): int(count) for user_id, count in query.all()}
        return {int(user_id): counts.get(int(user_id), 0) for user_id in user_ids}

    def list_followed_by_any(
        self,
        follower_ids: Sequence[int],
        *,
        exclude_ids: Iterable[int],
        limit: int,
    ) -> list[int]:
        """Return distinct accounts followed by any of ``follower_ids``.

        Order is the first appearance while scanning edges by insertion id.
        """

        if not follower_ids or limit <= 0:
            return []
        excluded = sorted({int(user_id) for user_id in exclude_ids})
        first_edge_id = func.min(FollowModel.id)
        query = self.session.query(FollowModel.following_id).filter(
            FollowModel.follower_id.in_(list(follower_ids))
        )
        if excluded:
            query = query.filter(FollowModel.following_id.notin_(excluded))
        query = (
            query.group_by(FollowModel.following_id)
            .order_by(first_edge_id.asc())
            .limit(limit)
        )
        return [int(following_id) for (following_id,) in query.all()]

    @staticmethod
    def _to_entity(model: FollowModel) -> Follow:
        return Follow(
            id=model.id,
            follower_id=model.follower_id,
            following_id=model.following_id,
            created_at=ensure_utc(model.created_at),
        )


__all__ = ["FollowRepository"]
