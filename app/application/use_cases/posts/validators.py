"""Validation helpers shared by post and comment use cases."""

from app.domain.exceptions import ValidationError

POST_MAX_LENGTH = 280
COMMENT_MAX_LENGTH = 500


def _ensure_text(text: str | None, *, label: str, max_length: int) -> str:
    if text is None or not text.strip():
        raise ValidationError(f"{label} is required")
    if len(text) > max_length:
        raise ValidationError(f"{label} cannot exceed {max_length} characters")
    return text


def ensure_valid_post_text(text: str | None) -> str:
    return _ensure_text(text, label="Post text", max_length=POST_MAX_LENGTH)


def ensure_valid_comment_text(text: str | None) -> str:
    return _ensure_text(text, label="Comment text", max_length=COMMENT_MAX_LENGTH)
