"""Use case for listing the comments of a post."""

from sqlalchemy.orm import Session

from app.domain.entities import Comment
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import CommentRepository, PostRepository
from app.utils import page_to_offset


def list_comments(
    session: Session, *, post_id: int, page: int = 1, limit: int = 10
) -> list[Comment]:
    if PostRepository(session).get_owner_id(post_id) is None:
        raise NotFoundError("Post not found")
    return list(
        CommentRepository(session).list_for_post(
            post_id, offset=page_to_offset(page, limit), limit=limit
        )
    )
