"""Container for paginated listings that report a total count."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class PaginatedResult(Generic[T]):
    """A page of ``items`` plus the size of the full result set."""

    items: list[T] = field(default_factory=list)
    total_count: int = 0
    offset: int = 0

    @property
    def has_more(self) -> bool:
        return self.total_count > self.offset + len(self.items)


__all__ = ["PaginatedResult"]
