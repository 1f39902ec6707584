import uuid
from datetime import datetime
from pydantic import Field
from app.core.schemas import ApiModel, UtcDatetime
from app.modules.children.schemas import ChildContext, ChildSummary
from app.modules.users.schemas import UserSummary

class ChatMessage(ApiModel):
    role: str
    content: str
    timestamp: UtcDatetime
    evidence: str | None = None
    sources: list[str] | None = None

class ConversationStart(ApiModel):
    user_id: uuid.UUID
    child_id: uuid.UUID | None = None

class MessageSend(ApiModel):
    message: str = Field(..., min_length=1)

class ConversationStarted(ApiModel):
    id: uuid.UUID
    session_id: str
    created_at: datetime
    updated_at: datetime
    child: ChildSummary | None = None

class ConversationListItem(ConversationStarted):
    last_message_time: datetime
    message_count: int
    last_message: ChatMessage | None = None

class ConversationDetail(ApiModel):
    id: uuid.UUID
    session_id: str
    created_at: datetime
    updated_at: datetime
    messages: list[ChatMessage]
    message_count: int
    user: UserSummary
    child: ChildContext | None = None

class MessageExchange(ApiModel):
    conversation_id: uuid.UUID
    session_id: str
    user_message: ChatMessage
    assistant_message: ChatMessage

class HealthTipOut(ApiModel):
    category: str
    tip: str
    age_group: str
