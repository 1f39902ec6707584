import logging
import uuid
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.clock import Clock
from app.core.errors import InvalidArgument, NotFound
from app.core.paging import Page, page_offset
from app.modules.chatbot.content import system_prompt
from app.modules.chatbot.models import ChatConversation
from app.modules.chatbot.repository import ConversationRepository
from app.modules.chatbot.schemas import (
    ChatMessage, ConversationDetail, ConversationListItem, ConversationStart,
    ConversationStarted, MessageExchange, MessageSend
)
from app.modules.chatbot.views import build_detail, build_list_item, build_started
from app.modules.children.repository import ChildRepository
from app.modules.children.schemas import ChildContext
from app.modules.users.repository import UserRepository
from app.platform.ports.text_responder import TextResponderPort

logger = logging.getLogger(__name__)

class ChatbotService:
    def __init__(self, session: AsyncSession, clock: Clock, responder: TextResponderPort):
        self.session = session
        self.clock = clock
        self.responder = responder
        self.repo = ConversationRepository(session, clock)
        self.users = UserRepository(session, clock)
        self.children = ChildRepository(session, clock)

    async def _conversation(self, conversation_id: uuid.UUID) -> ChatConversation:
        conv = await self.repo.get_active(conversation_id)
        if not conv:
            raise NotFound("Conversation")
        return conv

    async def list_for_user(self, user_id: uuid.UUID, page: int = 1, page_size: int = 10) -> Page[ConversationListItem]:
        if not await self.users.get_active(user_id):
            raise NotFound("User")
        convs, total = await self.repo.list_for_user(user_id, offset=page_offset(page, page_size), limit=page_size)
        children = await self.children.get_many(c.child_id for c in convs)
        today = self.clock.today()
        items = [build_list_item(c, children.get(c.child_id), today) for c in convs]
        return Page[ConversationListItem].build(items, total, page, page_size)

    async def get(self, conversation_id: uuid.UUID) -> ConversationDetail:
        conv = await self._conversation(conversation_id)
        user = await self.users.get(conv.user_id)
        child = await self.children.get(conv.child_id) if conv.child_id else None
        return build_detail(conv, user, child, self.clock.today())

    async def start(self, payload: ConversationStart) -> ConversationStarted:
        user = await self.users.get_active(payload.user_id)
        if not user:
            raise InvalidArgument("Invalid user")
        child = None
        if payload.child_id is not None:
            child = await self.children.get_owned(payload.child_id, user.id)
            if not child:
                logger.warning(f"Rejected conversation: child {payload.child_id} not owned by user {user.id}")
                raise InvalidArgument("Invalid child")

        today = self.clock.today()
        seed = ChatMessage(
            role="system",
            content=system_prompt(ChildContext.of(child, today) if child else None),
            timestamp=self.clock.now(),
        )
        conv = await self.repo.create(
            user_id=user.id,
            child_id=payload.child_id,
            session_id=str(uuid.uuid4()),
            messages=[_stored(seed)],
        )
        await self.session.commit()
        logger.info(f"Started conversation {conv.id} for user {user.id}")
        return build_started(conv, child, today)

    async def send_message(self, conversation_id: uuid.UUID, payload: MessageSend) -> MessageExchange:
        conv = await self._conversation(conversation_id)
        child = await self.children.get(conv.child_id) if conv.child_id else None
        context = ChildContext.of(child, self.clock.today()) if child else None

        user_message = ChatMessage(role="user", content=payload.message, timestamp=self.clock.now())
        reply = await self.responder.respond(payload.message, context)
        assistant_message = ChatMessage(
            role="assistant",
            content=reply.content,
            evidence=reply.evidence,
            sources=reply.sources,
            timestamp=self.clock.now(),
        )
        # JsonList is not mutation-tracked; assign a new list
        messages = list(conv.messages) + [_stored(user_message), _stored(assistant_message)]
        await self.repo.update(conv, messages=messages)
        await self.session.commit()
        return MessageExchange(
            conversation_id=conv.id,
            session_id=conv.session_id,
            user_message=user_message,
            assistant_message=assistant_message,
        )

    async def delete(self, conversation_id: uuid.UUID) -> None:
        if not await self.repo.soft_delete(conversation_id):
            raise NotFound("Conversation")
        await self.session.commit()
        logger.info(f"Deactivated conversation {conversation_id}")


def _stored(message: ChatMessage) -> dict:
    return message.model_dump(mode="json", exclude_none=True)
