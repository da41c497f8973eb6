"""Use cases for user accounts and profiles."""

from .get_profile import build_profile, get_current_profile, get_profile
from .list_user_posts import list_user_posts
from .search_users import search_users
from .sign_in_with_oauth import next_available_username, sign_in_with_oauth
from .suggest_users import DEFAULT_SUGGESTION_LIMIT, suggest_users
from .update_profile import update_profile
from .validators import generate_base_username, normalize_handle

__all__ = [
    "DEFAULT_SUGGESTION_LIMIT",
    "build_profile",
    "generate_base_username",
    "get_current_profile",
    "get_profile",
    "list_user_posts",
    "next_available_username",
    "normalize_handle",
    "search_users",
    "sign_in_with_oauth",
    "suggest_users",
    "update_profile",
]
