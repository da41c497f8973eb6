"""Use cases for the follow graph."""

from .follow_user import follow_user
from .list_connections import list_followers, list_following
from .unfollow_user import unfollow_user

__all__ = ["follow_user", "list_followers", "list_following", "unfollow_user"]
