"""User schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from .base import APIModel


class UserSummaryRead(APIModel):
    id: int
    name: str | None
    username: str
    image: str | None


class ProfileRead(APIModel):
    id: int
    name: str | None
    username: str
    image: str | None
    cover_image: str | None
    bio: str | None
    created_at: datetime | None
    followers_count: int
    following_count: int
    posts_count: int
    is_following: bool
    is_current_user: bool


class CurrentUserRead(ProfileRead):
    email: str | None
    updated_at: datetime | None


class ProfileUpdate(APIModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    name: str | None = None
    username: str | None = None
    bio: str | None = None
    image: str | None = None
    cover_image: str | None = None


class UserListItemRead(APIModel):
    id: int
    name: str | None
    username: str
    image: str | None
    bio: str | None
    is_following: bool
    is_current_user: bool
    followed_at: datetime | None = Field(default=None)


class SuggestedUserRead(APIModel):
    id: int
    name: str | None
    username: str
    image: str | None
    bio: str | None
    follower_count: int
    is_following: bool = False
    is_current_user: bool = False
