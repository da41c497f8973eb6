"""Domain entity representing a comment on a post."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .user import UserSummary


@dataclass
class Comment:
    """Text reply owned by ``user_id`` under ``post_id``."""

    id: int | None
    post_id: int
    user_id: int
    text: str
    created_at: datetime | None
    updated_at: datetime | None = None
    author: UserSummary | None = None


__all__ = ["Comment"]
