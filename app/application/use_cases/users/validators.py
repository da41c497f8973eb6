"""Common validation helpers for user use cases."""

import re

from app.domain.exceptions import ValidationError

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20
BIO_MAX_LENGTH = 160
NAME_MAX_LENGTH = 100
FALLBACK_HANDLE = "user"

_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")
_NON_HANDLE_CHARACTERS = re.compile(r"[^a-z0-9]")


def normalize_handle(value: str | None) -> str:
    """Lowercase ``value`` and drop every character outside ``[a-z0-9]``."""

    if not value:
        return ""
    return _NON_HANDLE_CHARACTERS.sub("", value.lower())


def generate_base_username(name: str | None, email: str | None) -> str:
    """Derive the handle a new account starts probing from.

    The display name wins; the local part of the email is used when the name
    normalizes to nothing, and ``"user"`` when both do.
    """

    base = normalize_handle(name)
    if not base and email:
        base = normalize_handle(email.split("@", 1)[0])
    return base or FALLBACK_HANDLE


def ensure_valid_username(username: str) -> str:
    """Return ``username`` stripped or raise ``ValidationError``."""

    normalized = username.strip()
    if not USERNAME_MIN_LENGTH <= len(normalized) <= USERNAME_MAX_LENGTH:
        raise ValidationError(
            f"Username must be between {USERNAME_MIN_LENGTH} and "
            f"{USERNAME_MAX_LENGTH} characters"
        )
    if not _USERNAME_PATTERN.match(normalized):
        raise ValidationError(
            "Username can only contain letters, numbers, and underscores"
        )
    return normalized


def ensure_valid_bio(bio: str | None) -> str | None:
    if bio is not None and len(bio) > BIO_MAX_LENGTH:
        raise ValidationError(f"Bio cannot exceed {BIO_MAX_LENGTH} characters")
    return bio


def ensure_valid_name(name: str | None) -> str | None:
    if name is None:
        return None
    normalized = name.strip()
    if len(normalized) > NAME_MAX_LENGTH:
        raise ValidationError(f"Name cannot exceed {NAME_MAX_LENGTH} characters")
    return normalized or None
