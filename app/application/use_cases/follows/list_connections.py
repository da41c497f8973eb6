"""Use cases for enumerating a user's followers and followees."""

from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import CurrentIdentity, User, UserListItem
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import FollowRepository, UserRepository
from app.utils import page_to_offset


def _annotate(
    session: Session,
    identity: CurrentIdentity,
    rows: list[tuple[User, datetime | None]],
) -> list[UserListItem]:
    followed = FollowRepository(session).filter_followed(
        identity.user_id, [user.id for user, _ in rows]
    )
    return [
        UserListItem(
            id=user.id,
            name=user.name,
            username=user.username,
            image=user.image,
            bio=user.bio,
            is_following=user.id in followed,
            is_current_user=identity.is_user(user.id),
            followed_at=followed_at,
        )
        for user, followed_at in rows
    ]


def _ensure_user_exists(session: Session, user_id: int) -> None:
    if not UserRepository(session).exists(user_id):
        raise NotFoundError("User not found")


def list_followers(
    session: Session,
    identity: CurrentIdentity,
    *,
    user_id: int,
    page: int = 1,
    limit: int = 20,
) -> list[UserListItem]:
    """Return who follows ``user_id``, most recent edge first."""

    _ensure_user_exists(session, user_id)
    rows = FollowRepository(session).list_followers(
        user_id, offset=page_to_offset(page, limit), limit=limit
    )
    return _annotate(session, identity, rows)


def list_following(
    session: Session,
    identity: CurrentIdentity,
    *,
    user_id: int,
    page: int = 1,
    limit: int = 20,
) -> list[UserListItem]:
    """Return who ``user_id`` follows, most recent edge first."""

    _ensure_user_exists(session, user_id)
    rows = FollowRepository(session).list_following(
        user_id, offset=page_to_offset(page, limit), limit=limit
    )
    return _annotate(session, identity, rows)
