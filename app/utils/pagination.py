"""Offset pagination helpers."""

from __future__ import annotations


def page_to_offset(page: int, limit: int) -> int:
    """Translate a 1-based ``page`` number into a row offset."""

    if page < 1:
        raise ValueError("page must be greater than or equal to 1")
    if limit < 1:
        raise ValueError("limit must be greater than or equal to 1")
    return (page - 1) * limit
