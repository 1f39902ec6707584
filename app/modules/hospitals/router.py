import uuid
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.clock import Clock, get_clock
from app.core.config import settings
from app.core.db import get_session
from app.core.paging import Page
from app.modules.appointments.schemas import AppointmentBook, AppointmentOut
from app.modules.appointments.service import AppointmentService
from app.modules.hospitals.models import COMMON_SPECIALTIES
from app.modules.hospitals.schemas import HospitalDetail, HospitalListItem, HospitalOut
from app.modules.hospitals.service import HospitalService

router = APIRouter()

def svc(session: AsyncSession = Depends(get_session), clock: Clock = Depends(get_clock)) -> HospitalService:
    return HospitalService(session, clock)

def booking_svc(session: AsyncSession = Depends(get_session), clock: Clock = Depends(get_clock)) -> AppointmentService:
    return AppointmentService(session, clock)

@router.get("", response_model=Page[HospitalListItem])
async def list_hospitals(
    city: str | None = None,
    state: str | None = None,
    specialty: str | None = None,
    latitude: float | None = Query(None, ge=-90, le=90),
    longitude: float | None = Query(None, ge=-180, le=180),
    radius_km: float = Query(settings.HOSPITAL_SEARCH_RADIUS_KM, gt=0, alias="radiusKm"),
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, alias="pageSize"),
    service: HospitalService = Depends(svc),
):
    return await service.list_hospitals(
        city=city,
        state=state,
        specialty=specialty,
        latitude=latitude,
        longitude=longitude,
        radius_km=radius_km,
        page=page,
        page_size=page_size,
    )

@router.get("/search", response_model=list[HospitalOut])
async def search_hospitals(query: str = "", service: HospitalService = Depends(svc)):
    return await service.search(query)

@router.get("/specialties", response_model=list[str])
async def list_specialties():
    return COMMON_SPECIALTIES

@router.get("/{hospital_id}", response_model=HospitalDetail)
async def get_hospital(hospital_id: uuid.UUID, service: HospitalService = Depends(svc)):
    return await service.get(hospital_id)

@router.post("/{hospital_id}/appointments", response_model=AppointmentOut, status_code=201)
async def book_appointment(
    hospital_id: uuid.UUID,
    payload: AppointmentBook,
    service: AppointmentService = Depends(booking_svc),
):
    return await service.book(hospital_id, payload)
