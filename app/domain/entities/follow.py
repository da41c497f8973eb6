"""Domain entity representing a follow edge."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Follow:
    """Directed relationship: ``follower_id`` follows ``following_id``."""

    id: int | None
    follower_id: int
    following_id: int
    created_at: datetime | None = None


__all__ = ["Follow"]
