import uuid
from datetime import datetime
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.clock import Clock, get_clock
from app.core.config import settings
from app.core.db import get_session
from app.core.paging import Page
from app.modules.medical_records.models import RECORD_TYPES
from app.modules.medical_records.schemas import (
    MedicalRecordCreate, MedicalRecordUpdate, MedicalRecordOut, MedicalRecordDetail, MedicalSummary
)
from app.modules.medical_records.service import MedicalRecordService

router = APIRouter()

def svc(session: AsyncSession = Depends(get_session), clock: Clock = Depends(get_clock)) -> MedicalRecordService:
    return MedicalRecordService(session, clock)

@router.get("/types", response_model=list[str])
async def list_record_types():
    return RECORD_TYPES

@router.get("/child/{child_id}", response_model=Page[MedicalRecordDetail])
async def list_child_records(
    child_id: uuid.UUID,
    record_type: str | None = Query(None, alias="recordType"),
    from_date: datetime | None = Query(None, alias="fromDate"),
    to_date: datetime | None = Query(None, alias="toDate"),
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, alias="pageSize"),
    service: MedicalRecordService = Depends(svc),
):
    return await service.list_for_child(
        child_id,
        record_type=record_type,
        from_date=from_date,
        to_date=to_date,
        page=page,
        page_size=page_size,
    )

@router.get("/child/{child_id}/summary", response_model=MedicalSummary)
async def child_medical_summary(child_id: uuid.UUID, service: MedicalRecordService = Depends(svc)):
    return await service.summary(child_id)

@router.get("/{record_id}", response_model=MedicalRecordDetail)
async def get_record(record_id: uuid.UUID, service: MedicalRecordService = Depends(svc)):
    return await service.get(record_id)

@router.post("", response_model=MedicalRecordOut, status_code=201)
async def create_record(payload: MedicalRecordCreate, service: MedicalRecordService = Depends(svc)):
    return await service.create(payload)

@router.put("/{record_id}", response_model=MedicalRecordOut)
async def update_record(record_id: uuid.UUID, payload: MedicalRecordUpdate, service: MedicalRecordService = Depends(svc)):
    return await service.update(record_id, payload)

@router.delete("/{record_id}", status_code=204)
async def delete_record(record_id: uuid.UUID, service: MedicalRecordService = Depends(svc)):
    await service.delete(record_id)
