"""Use cases for posts, feeds and likes."""

from .create_post import create_post
from .delete_post import delete_post
from .get_post import get_post
from .likes import like_post, unlike_post
from .list_feeds import list_explore_feed, list_home_feed
from .update_post import update_post
from .validators import (
    COMMENT_MAX_LENGTH,
    POST_MAX_LENGTH,
    ensure_valid_comment_text,
    ensure_valid_post_text,
)

__all__ = [
    "COMMENT_MAX_LENGTH",
    "POST_MAX_LENGTH",
    "create_post",
    "delete_post",
    "ensure_valid_comment_text",
    "ensure_valid_post_text",
    "get_post",
    "like_post",
    "list_explore_feed",
    "list_home_feed",
    "unlike_post",
    "update_post",
]
