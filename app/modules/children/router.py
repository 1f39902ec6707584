import uuid
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.clock import Clock, get_clock
from app.core.db import get_session
from app.modules.children.schemas import ChildCreate, ChildUpdate, ChildOut, ChildListItem
from app.modules.children.service import ChildService
from app.modules.children.views import ChildDashboard, ChildDetail

router = APIRouter()

def svc(session: AsyncSession = Depends(get_session), clock: Clock = Depends(get_clock)) -> ChildService:
    return ChildService(session, clock)

@router.get("/parent/{parent_id}", response_model=list[ChildListItem])
async def list_children(parent_id: uuid.UUID, service: ChildService = Depends(svc)):
    return await service.list_for_parent(parent_id)

@router.get("/{child_id}", response_model=ChildDetail)
async def get_child(child_id: uuid.UUID, service: ChildService = Depends(svc)):
    return await service.get(child_id)

@router.get("/{child_id}/dashboard", response_model=ChildDashboard)
async def child_dashboard(child_id: uuid.UUID, service: ChildService = Depends(svc)):
    return await service.dashboard(child_id)

@router.post("", response_model=ChildOut, status_code=201)
async def create_child(payload: ChildCreate, service: ChildService = Depends(svc)):
    return await service.create(payload)

@router.put("/{child_id}", response_model=ChildOut)
async def update_child(child_id: uuid.UUID, payload: ChildUpdate, service: ChildService = Depends(svc)):
    return await service.update(child_id, payload)

@router.delete("/{child_id}", status_code=204)
async def delete_child(child_id: uuid.UUID, service: ChildService = Depends(svc)):
    await service.delete(child_id)
