"""ORM models used by the application infrastructure."""

from .account import AccountModel
from .follow import FollowModel
from .message import MessageModel
from .notification import NotificationModel
from .post import CommentModel, LikeModel, PostModel
from .user import UserModel

__all__ = [
    "AccountModel",
    "CommentModel",
    "FollowModel",
    "LikeModel",
    "MessageModel",
    "NotificationModel",
    "PostModel",
    "UserModel",
]
