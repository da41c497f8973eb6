"""Routes for posts, feeds, likes and post comments."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.comments import (
    create_comment as create_comment_uc,
    list_comments as list_comments_uc,
)
from app.application.use_cases.posts import (
    create_post as create_post_uc,
    delete_post as delete_post_uc,
    get_post as get_post_uc,
    like_post as like_post_uc,
    list_explore_feed as list_explore_feed_uc,
    list_home_feed as list_home_feed_uc,
    unlike_post as unlike_post_uc,
    update_post as update_post_uc,
)
from app.domain.entities import CurrentIdentity
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_identity
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import (
    CommentRead,
    CommentWrite,
    MessageResponse,
    PostCreate,
    PostRead,
    PostUpdate,
    SuccessResponse,
)

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=list[PostRead])
def list_home_feed(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    following: bool = Query(default=False),
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Posts by the caller and the accounts they follow, newest first."""

    posts = list_home_feed_uc(
        db, identity, page=page, limit=limit, following_only=following
    )
    return [PostRead.model_validate(post) for post in posts]


@router.post("", response_model=PostRead, status_code=status.HTTP_201_CREATED)
def create_post(
    payload: PostCreate,
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    try:
        post = create_post_uc(db, identity, text=payload.text, image=payload.image)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return PostRead.model_validate(post)


@router.get("/explore", response_model=list[PostRead])
def list_explore_feed(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """All posts ranked by likes, then comments, then recency."""

    posts = list_explore_feed_uc(db, identity, page=page, limit=limit)
    return [PostRead.model_validate(post) for post in posts]


@router.get("/{post_id}", response_model=PostRead)
def read_post(
    post_id: int,
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    try:
        post = get_post_uc(db, identity, post_id=post_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return PostRead.model_validate(post)


@router.patch("/{post_id}", response_model=PostRead)
def update_post(
    post_id: int,
    payload: PostUpdate,
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Edit an owned post; the image is only replaced when sent."""

    changes = payload.model_dump(exclude_unset=True)
    try:
        if "image" in changes:
            post = update_post_uc(
                db, identity, post_id=post_id, text=payload.text, image=payload.image
            )
        else:
            post = update_post_uc(db, identity, post_id=post_id, text=payload.text)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return PostRead.model_validate(post)


@router.delete("/{post_id}", response_model=SuccessResponse)
def delete_post(
    post_id: int,
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    try:
        delete_post_uc(db, identity, post_id=post_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return SuccessResponse(success=True)


@router.post("/{post_id}/like", response_model=MessageResponse)
def like_post(
    post_id: int,
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    try:
        like_post_uc(db, identity, post_id=post_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return MessageResponse(message="Post liked successfully")


@router.delete("/{post_id}/like", response_model=MessageResponse)
def unlike_post(
    post_id: int,
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    try:
        unlike_post_uc(db, identity, post_id=post_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return MessageResponse(message="Post unliked successfully")


@router.get("/{post_id}/comments", response_model=list[CommentRead])
def list_comments(
    post_id: int,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    db: Session = Depends(get_db),
    _: CurrentIdentity = Depends(get_current_identity),
):
    try:
        comments = list_comments_uc(db, post_id=post_id, page=page, limit=limit)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return [CommentRead.model_validate(comment) for comment in comments]


@router.post(
    "/{post_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
)
def create_comment(
    post_id: int,
    payload: CommentWrite,
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    try:
        comment = create_comment_uc(db, identity, post_id=post_id, text=payload.text)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return CommentRead.model_validate(comment)
