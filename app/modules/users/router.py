import uuid
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.clock import Clock, get_clock
from app.core.db import get_session
from app.modules.users.schemas import UserCreate, UserUpdate, UserOut, UserListItem
from app.modules.users.service import UserService
from app.modules.users.views import UserDetail

router = APIRouter()

def svc(session: AsyncSession = Depends(get_session), clock: Clock = Depends(get_clock)) -> UserService:
    return UserService(session, clock)

@router.get("", response_model=list[UserListItem])
async def list_users(service: UserService = Depends(svc)):
    return await service.list_users()

@router.get("/cognito/{cognito_user_id}", response_model=UserDetail)
async def get_user_by_cognito_id(cognito_user_id: str, service: UserService = Depends(svc)):
    return await service.get_by_cognito_id(cognito_user_id)

@router.get("/{user_id}", response_model=UserDetail)
async def get_user(user_id: uuid.UUID, service: UserService = Depends(svc)):
    return await service.get(user_id)

@router.post("", response_model=UserOut, status_code=201)
async def create_user(payload: UserCreate, service: UserService = Depends(svc)):
    return await service.create(payload)

@router.put("/{user_id}", response_model=UserOut)
async def update_user(user_id: uuid.UUID, payload: UserUpdate, service: UserService = Depends(svc)):
    return await service.update(user_id, payload)

@router.delete("/{user_id}", status_code=204)
async def delete_user(user_id: uuid.UUID, service: UserService = Depends(svc)):
    await service.delete(user_id)
