"""Use cases for reading user profiles."""

from sqlalchemy.orm import Session

from app.domain.entities import CurrentIdentity, User, UserProfile
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import (
    FollowRepository,
    PostRepository,
    UserRepository,
)


def build_profile(session: Session, identity: CurrentIdentity, user: User) -> UserProfile:
    """Attach graph counts and the caller's relationship to ``user``."""

    follow_repository = FollowRepository(session)
    is_current_user = identity.is_user(user.id)
    return UserProfile(
        user=user,
        followers_count=follow_repository.count_followers(user.id),
        following_count=follow_repository.count_following(user.id),
        posts_count=PostRepository(session).count_by_author(user.id),
        is_following=(
            not is_current_user
            and follow_repository.exists(identity.user_id, user.id)
        ),
        is_current_user=is_current_user,
    )


def get_profile(session: Session, identity: CurrentIdentity, *, user_id: int) -> UserProfile:
    """Return the profile of ``user_id`` as seen by the caller."""

    user = UserRepository(session).get(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return build_profile(session, identity, user)


def get_current_profile(session: Session, identity: CurrentIdentity) -> UserProfile:
    return get_profile(session, identity, user_id=identity.user_id)
