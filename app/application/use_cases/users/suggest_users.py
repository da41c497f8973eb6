"""Use case for recommending accounts to follow."""

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import CurrentIdentity, SuggestedUser, User
from app.infrastructure.repositories import FollowRepository, UserRepository

DEFAULT_SUGGESTION_LIMIT = 5


def _to_suggestion(user: User, follower_count: int) -> SuggestedUser:
    return SuggestedUser(
        id=user.id,
        name=user.name,
        username=user.username,
        image=user.image,
        bio=user.bio,
        follower_count=follower_count,
    )


def suggest_users(
    session: Session,
    identity: CurrentIdentity,
    *,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
    popular_min_followers: int | None = None,
) -> list[SuggestedUser]:
    """Return up to ``limit`` accounts the caller does not follow yet.

    Candidates are drawn from three tiers, each only consulted while the
    quota is unfilled: the most-followed accounts, then accounts followed by
    the caller's followees, then the newest accounts. The caller and the
    accounts they already follow are never suggested, and no account
    appears twice.
    """

    if popular_min_followers is None:
        popular_min_followers = get_settings().suggestion_popular_min_followers

    user_repository = UserRepository(session)
    follow_repository = FollowRepository(session)

    following_ids = follow_repository.list_following_ids(identity.user_id)
    taken = {identity.user_id, *following_ids}

    suggestions = [
        _to_suggestion(user, count)
        for user, count in user_repository.list_most_followed(
            exclude_ids=sorted(taken),
            limit=limit,
            min_followers=popular_min_followers,
        )
    ]
    taken.update(suggestion.id for suggestion in suggestions)

    remaining = limit - len(suggestions)
    if remaining > 0 and following_ids:
        candidate_ids = follow_repository.list_followed_by_any(
            following_ids, exclude_ids=taken, limit=remaining
        )
        users = user_repository.get_map_by_ids(candidate_ids)
        counts = follow_repository.follower_counts(candidate_ids)
        for candidate_id in candidate_ids:
            user = users.get(candidate_id)
            if user is None:
                continue
            suggestions.append(_to_suggestion(user, counts.get(candidate_id, 0)))
            taken.add(candidate_id)

    remaining = limit - len(suggestions)
    if remaining > 0:
        newest = user_repository.list_newest(exclude_ids=sorted(taken), limit=remaining)
        counts = follow_repository.follower_counts([user.id for user in newest])
        suggestions.extend(_to_suggestion(user, counts.get(user.id, 0)) for user in newest)

    return suggestions
