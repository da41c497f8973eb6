"""Repository implementations for infrastructure layer."""

from .account_repository import AccountRepository
from .comment_repository import CommentRepository
from .follow_repository import FollowRepository
from .like_repository import LikeRepository
from .message_repository import MessageRepository
from .notification_repository import NotificationRepository
from .post_repository import PostRepository
from .user_repository import UserRepository

__all__ = [
    "AccountRepository",
    "CommentRepository",
    "FollowRepository",
    "LikeRepository",
    "MessageRepository",
    "NotificationRepository",
    "PostRepository",
    "UserRepository",
]
