"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.models import FollowModel, UserModel
from app.utils import ensure_utc, ensure_utc_naive, now_utc_naive

LIKE_ESCAPE = "\\"


def _escape_like(term: str) -> str:
    """Make ``%`` and ``_`` in ``term`` match literally."""

    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


class UserRepository:
    """Provide CRUD and lookup operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def exists(self, user_id: int) -> bool:
        query = self.session.query(UserModel.id).filter(UserModel.id == user_id)
        return self.session.query(query.exists()).scalar()

    def get_by_email(self, email: str) -> User | None:
        model = self.session.query(UserModel).filter_by(email=email).first()
        return self._to_entity(model) if model else None

    def username_exists(self, username: str, *, exclude_user_id: int | None = None) -> bool:
        query = self.session.query(UserModel.id).filter(UserModel.username == username)
        if exclude_user_id is not None:
            query = query.filter(UserModel.id != exclude_user_id)
        return self.session.query(query.exists()).scalar()

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user, include_creation_fields=True)
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id)
        if not model:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user, include_creation_fields=False)
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, user_id: int) -> None:
        model = self.session.get(UserModel, user_id)
        if not model:
            msg = f"User with id {user_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def record_login(self, user_id: int) -> None:
        self.session.query(UserModel).filter(UserModel.id == user_id).update(
            {UserModel.last_login_at: now_utc_naive()},
            synchronize_session=False,
        )
        self.session.commit()

    def get_map_by_ids(self, user_ids: Sequence[int]) -> dict[int, User]:
        if not user_ids:
            return {}

        unique_ids = {int(user_id) for user_id in user_ids}
        query = self.session.query(UserModel).filter(UserModel.id.in_(unique_ids))
        return {model.id: self._to_entity(model) for model in query.all()}

    def search(self, term: str, *, offset: int = 0, limit: int = 20) -> Sequence[User]:
        pattern = f"%{_escape_like(term)}%"
        query = (
            self.session.query(UserModel)
            .filter(
                or_(
                    UserModel.name.ilike(pattern, escape=LIKE_ESCAPE),
                    UserModel.username.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
            .order_by(UserModel.username.asc(), UserModel.name.asc())
            .offset(offset)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def list_most_followed(
        self,
        *,
        exclude_ids: Sequence[int],
        limit: int,
        min_followers: int = 0,
    ) -> list[tuple[User, int]]:
        """Return users ranked by follower count, highest first."""

        follower_count = func.count(FollowModel.id)
        query = (
            self.session.query(UserModel, follower_count.label("follower_count"))
            .outerjoin(FollowModel, FollowModel.following_id == UserModel.id)
            .filter(UserModel.id.notin_(list(exclude_ids)))
            .group_by(UserModel.id)
        )
        if min_followers > 0:
            query = query.having(follower_count >= min_followers)
        query = query.order_by(follower_count.desc(), UserModel.id.asc()).limit(limit)
        return [(self._to_entity(model), int(count)) for model, count in query.all()]

    def list_newest(self, *, exclude_ids: Sequence[int], limit: int) -> Sequence[User]:
        query = (
            self.session.query(UserModel)
            .filter(UserModel.id.notin_(list(exclude_ids)))
            .order_by(UserModel.created_at.desc(), UserModel.id.desc())
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            username=model.username,
            email=model.email,
            image=model.image,
            cover_image=model.cover_image,
            bio=model.bio,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
            last_login_at=ensure_utc(model.last_login_at),
        )

    @staticmethod
    def _apply_entity_to_model(
        model: UserModel, user: User, *, include_creation_fields: bool
    ) -> None:
        if include_creation_fields:
            model.created_at = ensure_utc_naive(user.created_at) or now_utc_naive()
            model.email = user.email
        model.name = user.name
        model.username = user.username
        model.image = user.image
        model.cover_image = user.cover_image
        model.bio = user.bio
        model.last_login_at = ensure_utc_naive(user.last_login_at)


__all__ = ["UserRepository"]
