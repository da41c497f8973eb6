"""Identity of the caller resolved once per request."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrentIdentity:
    """Authenticated caller passed explicitly to every use case."""

    user_id: int

    def is_user(self, user_id: int | None) -> bool:
        """Return ``True`` when ``user_id`` identifies the caller."""

        return user_id is not None and int(user_id) == self.user_id


__all__ = ["CurrentIdentity"]
