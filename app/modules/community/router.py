import uuid
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.clock import Clock, get_clock
from app.core.config import settings
from app.core.db import get_session
from app.core.paging import Page
from app.modules.community.models import POST_CATEGORIES
from app.modules.community.schemas import (
    CommentCreate, CommentOut, LikeRequest, LikeResult, PostCreate, PostDetail, PostOut
)
from app.modules.community.service import CommunityService

router = APIRouter()

def svc(session: AsyncSession = Depends(get_session), clock: Clock = Depends(get_clock)) -> CommunityService:
    return CommunityService(session, clock)

@router.get("/posts", response_model=Page[PostOut])
async def list_posts(
    category: str | None = None,
    search: str | None = None,
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=settings.MAX_PAGE_SIZE, alias="pageSize"),
    service: CommunityService = Depends(svc),
):
    return await service.list_posts(category=category, search=search, page=page, page_size=page_size)

@router.get("/posts/{post_id}", response_model=PostDetail)
async def get_post(post_id: uuid.UUID, service: CommunityService = Depends(svc)):
    return await service.get_post(post_id)

@router.post("/posts", response_model=PostOut, status_code=201)
async def create_post(payload: PostCreate, service: CommunityService = Depends(svc)):
    return await service.create_post(payload)

@router.post("/posts/{post_id}/comments", response_model=CommentOut, status_code=201)
async def add_comment(post_id: uuid.UUID, payload: CommentCreate, service: CommunityService = Depends(svc)):
    return await service.add_comment(post_id, payload)

@router.post("/posts/{post_id}/like", response_model=LikeResult)
async def like_post(post_id: uuid.UUID, payload: LikeRequest, service: CommunityService = Depends(svc)):
    return await service.toggle_like(payload.user_id, post_id=post_id)

@router.post("/comments/{comment_id}/like", response_model=LikeResult)
async def like_comment(comment_id: uuid.UUID, payload: LikeRequest, service: CommunityService = Depends(svc)):
    return await service.toggle_like(payload.user_id, comment_id=comment_id)

@router.get("/categories", response_model=list[str])
async def list_categories():
    return POST_CATEGORIES
