"""Domain entities representing users and their public projections."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    name: str | None
    username: str
    email: str | None
    image: str | None
    cover_image: str | None
    bio: str | None
    created_at: datetime | None
    updated_at: datetime | None
    last_login_at: datetime | None = None

    def to_summary(self) -> "UserSummary":
        """Return the minimal projection embedded in posts and messages."""

        return UserSummary(
            id=self.id or 0,
            name=self.name,
            username=self.username,
            image=self.image,
        )


@dataclass
class UserSummary:
    """Author/actor projection shared by posts, comments and messages."""

    id: int
    name: str | None
    username: str
    image: str | None


@dataclass
class UserProfile:
    """A user together with graph counts and caller-specific flags."""

    user: User
    followers_count: int
    following_count: int
    posts_count: int
    is_following: bool
    is_current_user: bool


@dataclass
class UserListItem:
    """Entry of a followers/following/search listing."""

    id: int
    name: str | None
    username: str
    image: str | None
    bio: str | None
    is_following: bool
    is_current_user: bool
    followed_at: datetime | None = None


@dataclass
class SuggestedUser:
    """Account recommended to the caller with its follower count."""

    id: int
    name: str | None
    username: str
    image: str | None
    bio: str | None
    follower_count: int
    is_following: bool = False
    is_current_user: bool = False


__all__ = ["SuggestedUser", "User", "UserListItem", "UserProfile", "UserSummary"]
