import uuid
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.clock import Clock, get_clock
from app.core.config import settings
from app.core.db import get_session
from app.core.paging import Page
from app.modules.chatbot.content import health_tips
from app.modules.chatbot.schemas import (
    ConversationDetail, ConversationListItem, ConversationStart, ConversationStarted,
    HealthTipOut, MessageExchange, MessageSend
)
from app.modules.chatbot.service import ChatbotService
from app.platform.ports.text_responder import TextResponderPort
from app.platform.provider_registry import get_text_responder

router = APIRouter()

def svc(
    session: AsyncSession = Depends(get_session),
    clock: Clock = Depends(get_clock),
    responder: TextResponderPort = Depends(get_text_responder),
) -> ChatbotService:
    return ChatbotService(session, clock, responder)

@router.get("/conversations/user/{user_id}", response_model=Page[ConversationListItem])
async def list_conversations(
    user_id: uuid.UUID,
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=settings.MAX_PAGE_SIZE, alias="pageSize"),
    service: ChatbotService = Depends(svc),
):
    return await service.list_for_user(user_id, page, page_size)

@router.get("/conversations/{conversation_id}", response_model=ConversationDetail)
async def get_conversation(conversation_id: uuid.UUID, service: ChatbotService = Depends(svc)):
    return await service.get(conversation_id)

@router.post("/conversations", response_model=ConversationStarted, status_code=201)
async def start_conversation(payload: ConversationStart, service: ChatbotService = Depends(svc)):
    return await service.start(payload)

@router.post("/conversations/{conversation_id}/messages", response_model=MessageExchange)
async def send_message(conversation_id: uuid.UUID, payload: MessageSend, service: ChatbotService = Depends(svc)):
    return await service.send_message(conversation_id, payload)

@router.delete("/conversations/{conversation_id}", status_code=204)
async def delete_conversation(conversation_id: uuid.UUID, service: ChatbotService = Depends(svc)):
    await service.delete(conversation_id)

@router.get("/health-tips", response_model=list[HealthTipOut])
async def get_health_tips(age_in_months: int | None = Query(None, ge=0, alias="ageInMonths")):
    return [HealthTipOut(**t) for t in health_tips(age_in_months)]
