"""Persistence layer for posts and their engagement counters."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import Post, PostExcerpt, UserSummary
from app.infrastructure.models import CommentModel, LikeModel, PostModel
from app.utils import ensure_utc


class PostRepository:
    """Provide CRUD operations and feed queries for posts.

    Every read returns posts decorated for a viewer: author summary, like and
    comment counts, and whether the viewer liked the post. Decoration issues a
    fixed number of batched queries per page regardless of its size.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, post_id: int, *, viewer_id: int) -> Post | None:
        model = self.session.get(PostModel, post_id)
        if model is None:
            return None
        return self._decorate([model], viewer_id=viewer_id)[0]

    def get_owner_id(self, post_id: int) -> int | None:
        return (
            self.session.query(PostModel.user_id)
            .filter(PostModel.id == post_id)
            .scalar()
        )

    def create(self, post: Post) -> Post:
        model = PostModel(user_id=post.user_id, text=post.text, image=post.image)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._decorate([model], viewer_id=post.user_id)[0]

    def update(self, post: Post, *, viewer_id: int) -> Post:
        model = self.session.get(PostModel, post.id)
        if model is None:
            msg = f"Post with id {post.id} not found"
            raise ValueError(msg)
        model.text = post.text
        model.image = post.image
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._decorate([model], viewer_id=viewer_id)[0]

    def delete(self, post_id: int) -> None:
        model = self.session.get(PostModel, post_id)
        if model is None:
            msg = f"Post with id {post_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def list_by_authors(
        self,
        author_ids: Sequence[int],
        *,
        viewer_id: int,
        offset: int = 0,
        limit: int = 10,
    ) -> list[Post]:
        if not author_ids:
            return []
        query = (
            self.session.query(PostModel)
            .filter(PostModel.user_id.in_(set(author_ids)))
            .order_by(PostModel.created_at.desc(), PostModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return self._decorate(query.all(), viewer_id=viewer_id)

    def count_by_author(self, author_id: int) -> int:
        return (
            self.session.query(func.count(PostModel.id))
            .filter(PostModel.user_id == author_id)
            .scalar()
            or 0
        )

    def list_by_engagement(
        self, *, viewer_id: int, offset: int = 0, limit: int = 20
    ) -> list[Post]:
        """Return posts ordered by likes, then comments, then recency."""

        like_counts = (
            self.session.query(
                LikeModel.post_id.label("post_id"),
                func.count(LikeModel.id).label("like_count"),
            )
            .group_by(LikeModel.post_id)
            .subquery()
        )
        comment_counts = (
            self.session.query(
                CommentModel.post_id.label("post_id"),
                func.count(CommentModel.id).label("comment_count"),
            )
            .group_by(CommentModel.post_id)
            .subquery()
        )
        query = (
            self.session.query(PostModel)
            .outerjoin(like_counts, like_counts.c.post_id == PostModel.id)
            .outerjoin(comment_counts, comment_counts.c.post_id == PostModel.id)
            .order_by(
                func.coalesce(like_counts.c.like_count, 0).desc(),
                func.coalesce(comment_counts.c.comment_count, 0).desc(),
                PostModel.created_at.desc(),
                PostModel.id.desc(),
            )
            .offset(offset)
            .limit(limit)
        )
        return self._decorate(query.all(), viewer_id=viewer_id)

    def get_excerpts(self, post_ids: Iterable[int]) -> dict[int, PostExcerpt]:
        """Return ``{id: excerpt}`` for the posts that still exist."""

        ids = {int(post_id) for post_id in post_ids if post_id is not None}
        if not ids:
            return {}
        query = self.session.query(PostModel.id, PostModel.text).filter(
            PostModel.id.in_(ids)
        )
        return {post_id: PostExcerpt(id=post_id, content=text) for post_id, text in query.all()}

    def _decorate(self, models: Sequence[PostModel], *, viewer_id: int) -> list[Post]:
        if not models:
            return []
        post_ids = [model.id for model in models]

        like_counts = dict(
            self.session.query(LikeModel.post_id, func.count(LikeModel.id))
            .filter(LikeModel.post_id.in_(post_ids))
            .group_by(LikeModel.post_id)
            .all()
        )
        comment_counts = dict(
            self.session.query(CommentModel.post_id, func.count(CommentModel.id))
            .filter(CommentModel.post_id.in_(post_ids))
            .group_by(CommentModel.post_id)
            .all()
        )
        liked_ids = {
            post_id
            for (post_id,) in self.session.query(LikeModel.post_id)
            .filter(LikeModel.post_id.in_(post_ids), LikeModel.user_id == viewer_id)
            .all()
        }

        return [
            self._to_entity(
                model,
                like_count=int(like_counts.get(model.id, 0)),
                comment_count=int(comment_counts.get(model.id, 0)),
                is_liked=model.id in liked_ids,
            )
            for model in models
        ]

    @staticmethod
    def _to_entity(
        model: PostModel,
        *,
        like_count: int = 0,
        comment_count: int = 0,
        is_liked: bool = False,
    ) -> Post:
        author = None
        if model.user is not None:
            author = UserSummary(
                id=model.user.id,
                name=model.user.name,
                username=model.user.username,
                image=model.user.image,
            )
        return Post(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            image=model.image,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
            author=author,
            like_count=like_count,
            comment_count=comment_count,
            is_liked=is_liked,
        )


__all__ = ["PostRepository"]
