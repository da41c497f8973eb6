"""Post and comment schemas."""

from datetime import datetime

from .base import APIModel
from .user import UserSummaryRead


class PostCreate(APIModel):
    text: str | None = None
    image: str | None = None


class PostUpdate(APIModel):
    text: str | None = None
    image: str | None = None


class PostRead(APIModel):
    id: int
    user_id: int
    text: str
    image: str | None
    created_at: datetime | None
    updated_at: datetime | None
    author: UserSummaryRead | None
    like_count: int
    comment_count: int
    is_liked: bool


class PostPage(APIModel):
    items: list[PostRead]
    total_count: int
    has_more: bool


class CommentWrite(APIModel):
    text: str | None = None


class CommentRead(APIModel):
    id: int
    post_id: int
    user_id: int
    text: str
    created_at: datetime | None
    updated_at: datetime | None
    author: UserSummaryRead | None
