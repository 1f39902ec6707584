import logging
from datetime import date, datetime
from pydantic import ValidationError
from app.modules.chatbot.models import ChatConversation
from app.modules.chatbot.schemas import (
    ChatMessage, ConversationDetail, ConversationListItem, ConversationStarted
)
from app.modules.children.schemas import ChildContext, ChildSummary
from app.modules.users.schemas import UserSummary

log = logging.getLogger(__name__)

def parse_messages(raw: list) -> list[ChatMessage]:
    """Stored entries that do not parse as messages are skipped."""
    messages = []
    for entry in raw or []:
        try:
            messages.append(ChatMessage.model_validate(entry))
        except ValidationError:
            log.warning("Skipping malformed chat message entry")
    return messages

def last_message_time(messages: list[ChatMessage], created_at: datetime) -> datetime:
    if not messages:
        return created_at
    return max(m.timestamp for m in messages)

def build_started(conv: ChatConversation, child, today: date) -> ConversationStarted:
    return ConversationStarted(
        id=conv.id,
        session_id=conv.session_id,
        created_at=conv.created_at,
        updated_at=conv.updated_at,
        child=ChildSummary.of(child, today) if child is not None else None,
    )

def build_list_item(conv: ChatConversation, child, today: date) -> ConversationListItem:
    messages = parse_messages(conv.messages)
    return ConversationListItem(
        **build_started(conv, child, today).model_dump(),
        last_message_time=last_message_time(messages, conv.created_at),
        message_count=len(messages),
        last_message=messages[-1] if messages else None,
    )

def build_detail(conv: ChatConversation, user, child, today: date) -> ConversationDetail:
    messages = parse_messages(conv.messages)
    return ConversationDetail(
        id=conv.id,
        session_id=conv.session_id,
        created_at=conv.created_at,
        updated_at=conv.updated_at,
        messages=messages,
        message_count=len(messages),
        user=UserSummary.model_validate(user),
        child=ChildContext.of(child, today) if child is not None else None,
    )
