"""Routes for editing and deleting comments."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.use_cases.comments import (
    delete_comment as delete_comment_uc,
    update_comment as update_comment_uc,
)
from app.domain.entities import CurrentIdentity
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_identity
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import CommentRead, CommentWrite, MessageResponse

router = APIRouter(prefix="/comments", tags=["comments"])


@router.put("/{comment_id}", response_model=CommentRead)
def update_comment(
    comment_id: int,
    payload: CommentWrite,
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    try:
        comment = update_comment_uc(db, identity, comment_id=comment_id, text=payload.text)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return CommentRead.model_validate(comment)


@router.delete("/{comment_id}", response_model=MessageResponse)
def delete_comment(
    comment_id: int,
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    try:
        delete_comment_uc(db, identity, comment_id=comment_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return MessageResponse(message="Comment deleted successfully")
