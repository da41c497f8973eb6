"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.domain.entities import CurrentIdentity
from app.infrastructure.database import get_db
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import decode_access_token

UNAUTHORIZED_MESSAGE = "Unauthorized. You must be logged in."

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHORIZED_MESSAGE,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_identity(token: str, db: Session) -> CurrentIdentity:
    """Resolve the authenticated caller for the provided session token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _unauthorized() from exc

    # Sign-in assertions carry a ``typ`` claim and are not session tokens.
    if payload.get("typ") is not None:
        raise _unauthorized()

    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError) as exc:
        raise _unauthorized() from exc

    if not UserRepository(db).exists(user_id):
        raise _unauthorized()
    return CurrentIdentity(user_id=user_id)


def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> CurrentIdentity:
    """Return the caller identified by the bearer token."""

    if credentials is None or not credentials.credentials:
        raise _unauthorized()
    return resolve_identity(credentials.credentials, db)
