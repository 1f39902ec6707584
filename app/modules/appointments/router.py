import uuid
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.clock import Clock, get_clock
from app.core.db import get_session
from app.modules.appointments.models import APPOINTMENT_TYPES
from app.modules.appointments.schemas import AppointmentOut, AppointmentStatusOut, AppointmentStatusUpdate
from app.modules.appointments.service import AppointmentService

router = APIRouter()

def svc(session: AsyncSession = Depends(get_session), clock: Clock = Depends(get_clock)) -> AppointmentService:
    return AppointmentService(session, clock)

@router.get("/types", response_model=list[str])
async def list_appointment_types():
    return APPOINTMENT_TYPES

@router.get("/{appointment_id}", response_model=AppointmentOut)
async def get_appointment(appointment_id: uuid.UUID, service: AppointmentService = Depends(svc)):
    return await service.get(appointment_id)

@router.put("/{appointment_id}/status", response_model=AppointmentStatusOut)
async def update_appointment_status(
    appointment_id: uuid.UUID,
    payload: AppointmentStatusUpdate,
    service: AppointmentService = Depends(svc),
):
    return await service.update_status(appointment_id, payload)
