"""Use cases for editing and deleting comments."""

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from app.application.use_cases.posts import ensure_valid_comment_text
from app.domain.entities import Comment, CurrentIdentity
from app.domain.exceptions import ForbiddenError, NotFoundError
from app.infrastructure.repositories import CommentRepository

logger = logging.getLogger(__name__)


def _get_owned_comment(
    repository: CommentRepository, identity: CurrentIdentity, comment_id: int, *, action: str
) -> Comment:
    comment = repository.get(comment_id)
    if comment is None:
        raise NotFoundError("Comment not found")
    if not identity.is_user(comment.user_id):
        raise ForbiddenError(f"You can only {action} your own comments")
    return comment


def update_comment(
    session: Session, identity: CurrentIdentity, *, comment_id: int, text: str | None
) -> Comment:
    text = ensure_valid_comment_text(text)
    repository = CommentRepository(session)
    comment = _get_owned_comment(repository, identity, comment_id, action="edit")
    saved = repository.update(replace(comment, text=text))
    logger.info("User %s edited comment %s", identity.user_id, comment_id)
    return saved


def delete_comment(session: Session, identity: CurrentIdentity, *, comment_id: int) -> None:
    repository = CommentRepository(session)
    _get_owned_comment(repository, identity, comment_id, action="delete")
    repository.delete(comment_id)
    logger.info("User %s deleted comment %s", identity.user_id, comment_id)
