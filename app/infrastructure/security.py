"""Security helpers for session tokens and sign-in assertions."""

from datetime import timedelta

from jose import JWTError, jwt

from app.config import get_settings
from app.utils import now_utc

ALGORITHM = "HS256"
IDENTITY_ASSERTION_TYPE = "oauth-identity"


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    settings = get_settings()
    expire = now_utc() + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode({**data, "exp": expire}, settings.secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, get_settings().secret_key, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def create_identity_assertion(
    *,
    provider: str,
    provider_account_id: str,
    email: str | None = None,
    name: str | None = None,
    picture: str | None = None,
    expires_delta: timedelta = timedelta(minutes=5),
) -> str:
    """Sign an OAuth identity the way the sign-in gateway does.

    The gateway completes the provider handshake and forwards the resulting
    profile to ``POST /auth/session`` as this short-lived token.
    """

    claims = {
        "typ": IDENTITY_ASSERTION_TYPE,
        "provider": provider,
        "sub": provider_account_id,
        "email": email,
        "name": name,
        "picture": picture,
    }
    return create_access_token(claims, expires_delta=expires_delta)


def decode_identity_assertion(assertion: str) -> dict:
    """Return the claims of a valid identity assertion or raise ``ValueError``."""

    claims = decode_access_token(assertion)
    if claims.get("typ") != IDENTITY_ASSERTION_TYPE:
        raise ValueError("Token is not an identity assertion")
    if not claims.get("provider") or not claims.get("sub"):
        raise ValueError("Identity assertion is missing the provider account")
    return claims
