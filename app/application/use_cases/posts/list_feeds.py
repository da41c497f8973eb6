"""Use cases composing the home and explore feeds."""

from sqlalchemy.orm import Session

from app.domain.entities import CurrentIdentity, Post
from app.infrastructure.repositories import FollowRepository, PostRepository
from app.utils import page_to_offset


def list_home_feed(
    session: Session,
    identity: CurrentIdentity,
    *,
    page: int = 1,
    limit: int = 10,
    following_only: bool = False,
) -> list[Post]:
    """Return posts by the caller and followed accounts, newest first.

    With ``following_only`` the caller's own posts are left out, and a caller
    who follows nobody gets an empty feed.
    """

    author_ids = FollowRepository(session).list_following_ids(identity.user_id)
    if following_only:
        if not author_ids:
            return []
    else:
        author_ids = [identity.user_id, *author_ids]

    return PostRepository(session).list_by_authors(
        author_ids,
        viewer_id=identity.user_id,
        offset=page_to_offset(page, limit),
        limit=limit,
    )


def list_explore_feed(
    session: Session,
    identity: CurrentIdentity,
    *,
    page: int = 1,
    limit: int = 20,
) -> list[Post]:
    """Return every post ranked by likes, then comments, then recency."""

    return PostRepository(session).list_by_engagement(
        viewer_id=identity.user_id,
        offset=page_to_offset(page, limit),
        limit=limit,
    )
