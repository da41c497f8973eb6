"""Use case for listing the caller's conversations."""

from sqlalchemy.orm import Session

from app.domain.entities import Conversation, CurrentIdentity
from app.infrastructure.repositories import MessageRepository, UserRepository


def list_conversations(session: Session, identity: CurrentIdentity) -> list[Conversation]:
    """Return one entry per counterpart, most recent activity first."""

    rows = MessageRepository(session).aggregate_conversations(identity.user_id)
    users = UserRepository(session).get_map_by_ids([counterpart_id for counterpart_id, _, _ in rows])
    return [
        Conversation(
            counterpart=users[counterpart_id].to_summary(),
            last_message_at=last_message_at,
            unread_count=unread_count,
        )
        for counterpart_id, last_message_at, unread_count in rows
        if counterpart_id in users
    ]
