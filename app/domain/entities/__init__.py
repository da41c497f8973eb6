"""Domain entities exposed by the application."""

from .account import Account
from .comment import Comment
from .follow import Follow
from .identity import CurrentIdentity
from .message import Conversation, Message
from .notification import POST_REFERENCING_TYPES, Notification, NotificationType
from .pagination import PaginatedResult
from .post import Post, PostExcerpt
from .user import SuggestedUser, User, UserListItem, UserProfile, UserSummary

__all__ = [
    "Account",
    "Comment",
    "Conversation",
    "CurrentIdentity",
    "Follow",
    "Message",
    "Notification",
    "NotificationType",
    "POST_REFERENCING_TYPES",
    "PaginatedResult",
    "Post",
    "PostExcerpt",
    "SuggestedUser",
    "User",
    "UserListItem",
    "UserProfile",
    "UserSummary",
]
