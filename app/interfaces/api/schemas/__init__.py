"""Pydantic schemas used by the HTTP interface."""

from .auth import SessionRequest, SessionResponse
from .base import APIModel, MessageResponse, SuccessResponse
from .message import ConversationRead, MessageCreate, MessageRead
from .notification import (
    NotificationCommentRead,
    NotificationMarkRead,
    NotificationMarkReadResponse,
    NotificationPage,
    NotificationPostRead,
    NotificationRead,
    UnreadCountRead,
)
from .post import CommentRead, CommentWrite, PostCreate, PostPage, PostRead, PostUpdate
from .user import (
    CurrentUserRead,
    ProfileRead,
    ProfileUpdate,
    SuggestedUserRead,
    UserListItemRead,
    UserSummaryRead,
)

__all__ = [
    "APIModel",
    "CommentRead",
    "CommentWrite",
    "ConversationRead",
    "CurrentUserRead",
    "MessageCreate",
    "MessageRead",
    "MessageResponse",
    "NotificationCommentRead",
    "NotificationMarkRead",
    "NotificationMarkReadResponse",
    "NotificationPage",
    "NotificationPostRead",
    "NotificationRead",
    "PostCreate",
    "PostPage",
    "PostRead",
    "PostUpdate",
    "ProfileRead",
    "ProfileUpdate",
    "SessionRequest",
    "SessionResponse",
    "SuccessResponse",
    "SuggestedUserRead",
    "UnreadCountRead",
    "UserListItemRead",
    "UserSummaryRead",
]
