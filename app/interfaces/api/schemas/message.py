"""Direct message schemas."""

from datetime import datetime

from .base import APIModel
from .user import UserSummaryRead


class MessageCreate(APIModel):
    content: str | None = None


class MessageRead(APIModel):
    id: int
    from_user_id: int
    to_user_id: int
    content: str
    is_read: bool
    created_at: datetime | None
    from_user: UserSummaryRead | None
    is_own_message: bool


class ConversationRead(APIModel):
    id: int
    name: str | None
    username: str
    image: str | None
    last_message_at: datetime
    unread_count: int
