"""Routes for exchanging a sign-in assertion for a session token."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.users import (
    get_current_profile as get_current_profile_uc,
    sign_in_with_oauth as sign_in_with_oauth_uc,
)
from app.domain.entities import CurrentIdentity
from app.infrastructure.database import get_db
from app.infrastructure.security import create_access_token, decode_identity_assertion
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import SessionRequest, SessionResponse

from .users import to_current_user_read

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/session", response_model=SessionResponse)
def create_session(payload: SessionRequest, db: Session = Depends(get_db)):
    """Sign in with the identity forwarded by the OAuth gateway."""

    try:
        claims = decode_identity_assertion(payload.assertion)
    except ValueError as exc:
        logger.info("Rejected sign-in assertion: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid sign-in assertion",
        ) from exc

    try:
        user = sign_in_with_oauth_uc(
            db,
            provider=str(claims["provider"]),
            provider_account_id=str(claims["sub"]),
            email=claims.get("email"),
            name=claims.get("name"),
            image=claims.get("picture"),
        )
        profile = get_current_profile_uc(db, CurrentIdentity(user_id=user.id))
    except ValueError as exc:
        raise to_http_exception(exc) from exc

    access_token = create_access_token({"sub": str(user.id)})
    return SessionResponse(
        access_token=access_token,
        token_type="bearer",
        user=to_current_user_read(profile),
    )
