"""Use case for retrieving a single post."""

from sqlalchemy.orm import Session

from app.domain.entities import CurrentIdentity, Post
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import PostRepository


def get_post(session: Session, identity: CurrentIdentity, *, post_id: int) -> Post:
    """Return the requested post or raise an error if it does not exist."""

    post = PostRepository(session).get(post_id, viewer_id=identity.user_id)
    if post is None:
        raise NotFoundError("Post not found")
    return post
