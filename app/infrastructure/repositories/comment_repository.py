"""Persistence layer for comments."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Comment, UserSummary
from app.infrastructure.models import CommentModel
from app.utils import ensure_utc


class CommentRepository:
    """Provide CRUD operations for comments."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, comment_id: int) -> Comment | None:
        model = self.session.get(CommentModel, comment_id)
        return self._to_entity(model) if model else None

    def list_for_post(
        self, post_id: int, *, offset: int = 0, limit: int = 10
    ) -> Sequence[Comment]:
        query = (
            self.session.query(CommentModel)
            .filter(CommentModel.post_id == post_id)
            .order_by(CommentModel.created_at.desc(), CommentModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, comment: Comment) -> Comment:
        model = CommentModel(
            post_id=comment.post_id,
            user_id=comment.user_id,
            text=comment.text,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, comment: Comment) -> Comment:
        model = self.session.get(CommentModel, comment.id)
        if model is None:
            msg = f"Comment with id {comment.id} not found"
            raise ValueError(msg)
        model.text = comment.text
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, comment_id: int) -> None:
        model = self.session.get(CommentModel, comment_id)
        if model is None:
            msg = f"Comment with id {comment_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _to_entity(model: CommentModel) -> Comment:
        author = None
        if model.user is not None:
            author = UserSummary(
                id=model.user.id,
                name=model.user.name,
                username=model.user.username,
                image=model.user.image,
            )
        return Comment(
            id=model.id,
            post_id=model.post_id,
            user_id=model.user_id,
            text=model.text,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
            author=author,
        )


__all__ = ["CommentRepository"]
