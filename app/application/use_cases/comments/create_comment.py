"""Use case for commenting on a post."""

import logging

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import notify_comment
from app.application.use_cases.posts import ensure_valid_comment_text
from app.domain.entities import Comment, CurrentIdentity
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import CommentRepository, PostRepository

logger = logging.getLogger(__name__)


def create_comment(
    session: Session, identity: CurrentIdentity, *, post_id: int, text: str | None
) -> Comment:
    """Store the comment and notify the post owner."""

    owner_id = PostRepository(session).get_owner_id(post_id)
    if owner_id is None:
        raise NotFoundError("Post not found")
    text = ensure_valid_comment_text(text)

    comment = CommentRepository(session).create(
        Comment(
            id=None,
            post_id=post_id,
            user_id=identity.user_id,
            text=text,
            created_at=None,
        )
    )
    logger.info("User %s commented %s on post %s", identity.user_id, comment.id, post_id)
    notify_comment(
        session,
        commenter_id=identity.user_id,
        post_owner_id=owner_id,
        post_id=post_id,
        text=text,
    )
    return comment
