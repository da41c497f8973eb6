"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .post import PostExcerpt
from .user import UserSummary


class NotificationType(str, Enum):
    """Interactions that produce a notification."""

    FOLLOW = "FOLLOW"
    LIKE = "LIKE"
    COMMENT = "COMMENT"
    MENTION = "MENTION"


POST_REFERENCING_TYPES = frozenset(
    {NotificationType.LIKE, NotificationType.COMMENT, NotificationType.MENTION}
)


@dataclass
class Notification:
    """Information message delivered to ``to_user_id``."""

    id: int | None
    type: NotificationType
    from_user_id: int
    to_user_id: int
    post_id: int | None = None
    body: str | None = None
    is_read: bool = False
    created_at: datetime | None = None
    actor: UserSummary | None = None
    post: PostExcerpt | None = None

    def references_post(self) -> bool:
        """Return ``True`` when the notification points at a post."""

        return self.post_id is not None and self.type in POST_REFERENCING_TYPES


__all__ = ["Notification", "NotificationType", "POST_REFERENCING_TYPES"]
