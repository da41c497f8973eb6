"""Use case for listing the posts written by one user."""

from sqlalchemy.orm import Session

from app.domain.entities import CurrentIdentity, PaginatedResult, Post
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import PostRepository, UserRepository
from app.utils import page_to_offset


def list_user_posts(
    session: Session,
    identity: CurrentIdentity,
    *,
    user_id: int,
    page: int = 1,
    limit: int = 10,
) -> PaginatedResult[Post]:
    if not UserRepository(session).exists(user_id):
        raise NotFoundError("User not found")

    repository = PostRepository(session)
    offset = page_to_offset(page, limit)
    posts = repository.list_by_authors(
        [user_id], viewer_id=identity.user_id, offset=offset, limit=limit
    )
    return PaginatedResult(
        items=posts,
        total_count=repository.count_by_author(user_id),
        offset=offset,
    )
