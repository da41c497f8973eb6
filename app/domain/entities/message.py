"""Domain entities for direct messages and derived conversations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .user import UserSummary


@dataclass
class Message:
    """Direct message from ``from_user_id`` to ``to_user_id``."""

    id: int | None
    from_user_id: int
    to_user_id: int
    content: str
    is_read: bool = False
    created_at: datetime | None = None
    sender: UserSummary | None = None


@dataclass
class Conversation:
    """Messages exchanged with one counterpart, aggregated for list display."""

    counterpart: UserSummary
    last_message_at: datetime
    unread_count: int


__all__ = ["Conversation", "Message"]
