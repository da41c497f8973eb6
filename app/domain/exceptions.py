"""Error taxonomy raised by the application use cases.

Every error derives from ``ValueError`` so callers that only care about
"the request could not be fulfilled" can keep catching the builtin type.
The HTTP layer maps each subclass to its status code.
"""

from __future__ import annotations


class DomainError(ValueError):
    """Base class for expected, user-facing failures."""


class ValidationError(DomainError):
    """Malformed or out-of-range input."""


class NotFoundError(DomainError):
    """A referenced entity does not exist."""


class ForbiddenError(DomainError):
    """The caller is authenticated but not entitled to the action."""


class ConflictError(DomainError):
    """Duplicate or self-referential action."""


__all__ = [
    "ConflictError",
    "DomainError",
    "ForbiddenError",
    "NotFoundError",
    "ValidationError",
]
