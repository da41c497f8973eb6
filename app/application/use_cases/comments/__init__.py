"""Use cases for post comments."""

from .create_comment import create_comment
from .list_comments import list_comments
from .update_comment import delete_comment, update_comment

__all__ = ["create_comment", "delete_comment", "list_comments", "update_comment"]
