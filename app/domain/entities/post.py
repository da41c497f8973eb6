"""Domain entities representing posts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .user import UserSummary


@dataclass
class Post:
    """A post as seen by a specific viewer."""

    id: int | None
    user_id: int
    text: str
    image: str | None
    created_at: datetime | None
    updated_at: datetime | None
    author: UserSummary | None = None
    like_count: int = 0
    comment_count: int = 0
    is_liked: bool = False


@dataclass
class PostExcerpt:
    """Minimal post projection referenced by notifications."""

    id: int
    content: str


__all__ = ["Post", "PostExcerpt"]
