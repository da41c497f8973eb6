"""Use case for editing the caller's own profile."""

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import CurrentIdentity, UserProfile
from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.repositories import UserRepository
from app.utils import now_utc

from .get_profile import build_profile
from .validators import ensure_valid_bio, ensure_valid_name, ensure_valid_username

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"name", "username", "bio", "image", "cover_image"})


def update_profile(
    session: Session,
    identity: CurrentIdentity,
    *,
    changes: Mapping[str, Any],
) -> UserProfile:
    """Apply the provided subset of profile fields.

    Keys absent from ``changes`` keep their current value; a key mapped to
    ``None`` clears the field (``username`` cannot be cleared).
    """

    unknown = set(changes) - EDITABLE_FIELDS
    if unknown:
        raise ValidationError(f"Unsupported profile fields: {', '.join(sorted(unknown))}")

    repository = UserRepository(session)
    current_user = repository.get(identity.user_id)
    if current_user is None:
        raise NotFoundError("User not found")

    values: dict[str, Any] = {}
    if "username" in changes:
        if changes["username"] is None:
            raise ValidationError("Username cannot be empty")
        username = ensure_valid_username(changes["username"])
        if repository.username_exists(username, exclude_user_id=current_user.id):
            raise ValidationError("Username is already taken")
        values["username"] = username
    if "bio" in changes:
        values["bio"] = ensure_valid_bio(changes["bio"])
    if "name" in changes:
        values["name"] = ensure_valid_name(changes["name"])
    if "image" in changes:
        values["image"] = changes["image"]
    if "cover_image" in changes:
        values["cover_image"] = changes["cover_image"]

    updated_user = replace(current_user, updated_at=now_utc(), **values)
    try:
        saved = repository.update(updated_user)
    except IntegrityError as exc:
        raise ValidationError("Username is already taken") from exc

    logger.info("User %s updated profile fields %s", saved.id, sorted(values))
    return build_profile(session, identity, saved)
