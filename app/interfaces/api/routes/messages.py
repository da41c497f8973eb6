"""Routes for direct messages and conversations."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.messages import (
    get_thread as get_thread_uc,
    list_conversations as list_conversations_uc,
    send_message as send_message_uc,
)
from app.domain.entities import Conversation, CurrentIdentity, Message
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_identity
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import (
    ConversationRead,
    MessageCreate,
    MessageRead,
    UserSummaryRead,
)

router = APIRouter(prefix="/messages", tags=["messages"])


def _message_to_schema(message: Message, identity: CurrentIdentity) -> MessageRead:
    return MessageRead(
        id=message.id or 0,
        from_user_id=message.from_user_id,
        to_user_id=message.to_user_id,
        content=message.content,
        is_read=message.is_read,
        created_at=message.created_at,
        from_user=(
            UserSummaryRead.model_validate(message.sender) if message.sender else None
        ),
        is_own_message=identity.is_user(message.from_user_id),
    )


def _conversation_to_schema(conversation: Conversation) -> ConversationRead:
    counterpart = conversation.counterpart
    return ConversationRead(
        id=counterpart.id,
        name=counterpart.name,
        username=counterpart.username,
        image=counterpart.image,
        last_message_at=conversation.last_message_at,
        unread_count=conversation.unread_count,
    )


@router.get("", response_model=list[ConversationRead])
def list_conversations(
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """One entry per counterpart with the unread count, latest activity first."""

    return [
        _conversation_to_schema(conversation)
        for conversation in list_conversations_uc(db, identity)
    ]


@router.get("/{user_id}", response_model=list[MessageRead])
def read_thread(
    user_id: int,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    """Messages exchanged with ``user_id``, newest first; marks them read."""

    try:
        messages = get_thread_uc(
            db, identity, other_user_id=user_id, page=page, limit=limit
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return [_message_to_schema(message, identity) for message in messages]


@router.post("/{user_id}", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
def send_message(
    user_id: int,
    payload: MessageCreate,
    db: Session = Depends(get_db),
    identity: CurrentIdentity = Depends(get_current_identity),
):
    try:
        message = send_message_uc(
            db, identity, recipient_id=user_id, content=payload.content
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _message_to_schema(message, identity)
