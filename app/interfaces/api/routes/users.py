"""Routes for profiles, search, suggestions and the follow graph."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.application.use_cases.follows import (
    follow_user as follow_user_uc,
    list_followers as list_followers_uc,
    list_following as list_following_uc,
    unfollow_user as unfollow_user_uc,
)
from app.application.use_cases.users import (
    DEFAULT_SUGGESTION_LIMIT,
    get_current_profile as get_current_profile_uc,
    get_profile as get_profile_uc,
    list_user_posts as list_user_posts_uc,
    search_users as search_users_uc,
    suggest_users as suggest_users_uc,
    update_profile as update_profile_uc,
)
from app.domain.entities import CurrentIdentity, UserProfile
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_identity
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import (
    CurrentUserRead,
    MessageResponse,
    PostPage,
    PostRead,
    ProfileRead,
    ProfileUpdate,
    SuggestedUserRead,
    UserListItemRead,
)

router = APIRouter(prefix="/users", tags=["users"])


def _profile_fields(profile: UserProfile) -> dict:
    user = profile.user
    return {
        "id": user.id,
        "name": user.name,
        "username": user.username,
        "image": user.image,
        "cover_image": user.cover_image,
        "bio": user.bio,
        "created_at": user.created_at,
        "followers_count": profile.followers_count,
        "following_count": profile.following_count,
        "posts_count": profile.posts_count,
        "is_following": profile.is_following,
        "is_current_user": profile.is_current_user,
    }


def to_profile_read(profile: UserProfile) -> ProfileRead:
    return ProfileRead(**_profile_fields(profile))


def to_current_user_read(profile: UserProfile) -> CurrentUserRead:
    return CurrentUserRead(
        **_profile_fields(profile),
        email=profile.user.email,
        updated_at=profile.user.updated_at,
    )


@router.get("/me", response_model=CurrentUserRead)
def read_current_user(
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Return the authenticated user's own profile, including the email."""

    try:
        profile = get_current_profile_uc(db, identity)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return to_current_user_read(profile)


@router.patch("/me", response_model=CurrentUserRead)
def update_current_user(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Update the provided subset of the caller's profile fields."""

    try:
        profile = update_profile_uc(
            db, identity, changes=payload.model_dump(exclude_unset=True)
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return to_current_user_read(profile)


@router.get("/search", response_model=list[UserListItemRead])
def search_users(
    q: str | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    try:
        users = search_users_uc(db, identity, query=q, page=page, limit=limit)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return [UserListItemRead.model_validate(user) for user in users]


@router.get("/suggestions", response_model=list[SuggestedUserRead])
def suggest_users(
    limit: int = Query(default=DEFAULT_SUGGESTION_LIMIT, ge=1, le=50),
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Recommend accounts the caller does not follow yet."""

    suggestions = suggest_users_uc(db, identity, limit=limit)
    return [SuggestedUserRead.model_validate(suggestion) for suggestion in suggestions]


@router.get("/{user_id}", response_model=ProfileRead)
def read_user(
    user_id: int,
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    try:
        profile = get_profile_uc(db, identity, user_id=user_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return to_profile_read(profile)


@router.post("/{user_id}/follow", response_model=MessageResponse)
def follow_user(
    user_id: int,
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    try:
        follow_user_uc(db, identity, target_id=user_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return MessageResponse(message="User followed successfully")


@router.delete("/{user_id}/follow", response_model=MessageResponse)
def unfollow_user(
    user_id: int,
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    try:
        unfollow_user_uc(db, identity, target_id=user_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return MessageResponse(message="User unfollowed successfully")


@router.get("/{user_id}/followers", response_model=list[UserListItemRead])
def list_followers(
    user_id: int,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    try:
        users = list_followers_uc(db, identity, user_id=user_id, page=page, limit=limit)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return [UserListItemRead.model_validate(user) for user in users]


@router.get("/{user_id}/following", response_model=list[UserListItemRead])
def list_following(
    user_id: int,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    try:
        users = list_following_uc(db, identity, user_id=user_id, page=page, limit=limit)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return [UserListItemRead.model_validate(user) for user in users]


@router.get("/{user_id}/posts", response_model=PostPage)
def list_user_posts(
    user_id: int,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    try:
        result = list_user_posts_uc(db, identity, user_id=user_id, page=page, limit=limit)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return PostPage(
        items=[PostRead.model_validate(post) for post in result.items],
        total_count=result.total_count,
        has_more=result.has_more,
    )
