"""Authentication related schemas."""

from pydantic import Field

from .base import APIModel
from .user import CurrentUserRead


class SessionRequest(APIModel):
    assertion: str = Field(
        ..., min_length=1, description="Signed identity issued by the sign-in gateway"
    )


class SessionResponse(APIModel):
    access_token: str
    token_type: str = "bearer"
    user: CurrentUserRead
