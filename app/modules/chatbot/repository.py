import uuid
from typing import Sequence
from app.core.repository import SoftDeleteRepository
from app.modules.chatbot.models import ChatConversation

class ConversationRepository(SoftDeleteRepository[ChatConversation]):
    model = ChatConversation

    async def list_for_user(
        self, user_id: uuid.UUID, offset: int = 0, limit: int | None = None
    ) -> tuple[Sequence[ChatConversation], int]:
        return await self.list_active(
            ChatConversation.user_id == user_id,
            order_by=(ChatConversation.updated_at.desc(),),
            offset=offset,
            limit=limit,
        )
