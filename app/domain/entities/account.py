"""Domain entity linking an OAuth provider account to a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Account:
    """External identity used to sign in as ``user_id``."""

    id: int | None
    user_id: int
    provider: str
    provider_account_id: str
    created_at: datetime | None = None


__all__ = ["Account"]
