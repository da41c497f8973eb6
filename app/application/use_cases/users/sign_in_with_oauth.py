"""Use case for signing in through an OAuth provider."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import Account, User
from app.domain.exceptions import ConflictError, NotFoundError
from app.infrastructure.repositories import AccountRepository, UserRepository
from app.utils import now_utc

from .validators import generate_base_username

logger = logging.getLogger(__name__)

MAX_PROVISIONING_ATTEMPTS = 50


def next_available_username(
    repository: UserRepository, base: str, *, start: int = 0
) -> tuple[str, int]:
    """Return the first free handle among ``base``, ``base1``, ``base2``...

    Probing begins at suffix ``start``; the suffix of the returned handle is
    reported so a caller losing an insert race can resume after it.
    """

    suffix = start
    while True:
        candidate = base if suffix == 0 else f"{base}{suffix}"
        if not repository.username_exists(candidate):
            return candidate, suffix
        suffix += 1


def sign_in_with_oauth(
    session: Session,
    *,
    provider: str,
    provider_account_id: str,
    email: str | None = None,
    name: str | None = None,
    image: str | None = None,
) -> User:
    """Return the user linked to the provider account, creating it on first use."""

    account_repository = AccountRepository(session)
    user_repository = UserRepository(session)

    account = account_repository.get_by_provider(provider, provider_account_id)
    if account is not None:
        user_repository.record_login(account.user_id)
        user = user_repository.get(account.user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    if email and user_repository.get_by_email(email) is not None:
        raise ConflictError("Email is already linked to another account")

    user = _provision_user(user_repository, email=email, name=name, image=image)
    try:
        account_repository.create(
            Account(
                id=None,
                user_id=user.id,
                provider=provider,
                provider_account_id=provider_account_id,
            )
        )
    except IntegrityError:
        # A concurrent first sign-in linked the account; keep that user.
        user_repository.delete(user.id)
        account = account_repository.get_by_provider(provider, provider_account_id)
        if account is None:
            raise
        existing = user_repository.get(account.user_id)
        if existing is None:
            raise NotFoundError("User not found") from None
        return existing

    logger.info(
        "Provisioned user %s (@%s) for %s account", user.id, user.username, provider
    )
    return user


def _provision_user(
    repository: UserRepository,
    *,
    email: str | None,
    name: str | None,
    image: str | None,
) -> User:
    base = generate_base_username(name, email)
    suffix = 0
    for _ in range(MAX_PROVISIONING_ATTEMPTS):
        username, suffix = next_available_username(repository, base, start=suffix)
        now = now_utc()
        candidate = User(
            id=None,
            name=name,
            username=username,
            email=email or None,
            image=image,
            cover_image=None,
            bio=None,
            created_at=now,
            updated_at=now,
            last_login_at=now,
        )
        try:
            return repository.create(candidate)
        except IntegrityError:
            if email and repository.get_by_email(email) is not None:
                raise ConflictError(
                    "Email is already linked to another account"
                ) from None
            logger.info("Username %s was taken concurrently, probing further", username)
            suffix += 1

    raise ConflictError("Could not allocate a unique username")
