"""Use case for finding users by name or handle."""

from sqlalchemy.orm import Session

from app.domain.entities import CurrentIdentity, UserListItem
from app.domain.exceptions import ValidationError
from app.infrastructure.repositories import FollowRepository, UserRepository
from app.utils import page_to_offset


def search_users(
    session: Session,
    identity: CurrentIdentity,
    *,
    query: str | None,
    page: int = 1,
    limit: int = 10,
) -> list[UserListItem]:
    """Case-insensitive substring match on display name or username."""

    term = (query or "").strip()
    if not term:
        raise ValidationError("Search query is required")

    users = UserRepository(session).search(
        term, offset=page_to_offset(page, limit), limit=limit
    )
    followed = FollowRepository(session).filter_followed(
        identity.user_id, [user.id for user in users]
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
        )
        for user in users
    ]
