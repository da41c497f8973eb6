"""Use cases and helpers for user notifications."""

from .events import notify_comment, notify_follow, notify_like
from .list_notifications import count_unread_notifications, list_notifications
from .mark_notifications_read import mark_notifications_read

__all__ = [
    "count_unread_notifications",
    "list_notifications",
    "mark_notifications_read",
    "notify_comment",
    "notify_follow",
    "notify_like",
]
