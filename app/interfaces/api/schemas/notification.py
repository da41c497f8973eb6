"""Notification schemas."""

from datetime import datetime

from pydantic import Field

from .base import APIModel
from .user import UserSummaryRead


class NotificationPostRead(APIModel):
    id: int
    content: str


class NotificationCommentRead(APIModel):
    content: str


class NotificationRead(APIModel):
    id: int
    type: str
    created_at: datetime | None
    is_read: bool
    actor: UserSummaryRead | None
    post: NotificationPostRead | None = None
    comment: NotificationCommentRead | None = None


class NotificationPage(APIModel):
    items: list[NotificationRead]
    total_count: int
    has_more: bool
    page: int
    limit: int


class NotificationMarkRead(APIModel):
    ids: list[int] | None = None
    mark_all: bool = Field(default=False, alias="all")


class NotificationMarkReadResponse(APIModel):
    message: str
    updated: int


class UnreadCountRead(APIModel):
    count: int
