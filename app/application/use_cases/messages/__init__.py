"""Use cases for direct messaging."""

from .get_thread import get_thread
from .list_conversations import list_conversations
from .send_message import MESSAGE_MAX_LENGTH, send_message

__all__ = ["MESSAGE_MAX_LENGTH", "get_thread", "list_conversations", "send_message"]
