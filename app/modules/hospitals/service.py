import logging
import uuid
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.clock import Clock
from app.core.errors import InvalidArgument, NotFound
from app.core.paging import Page, page_offset
from app.modules.appointments.repository import AppointmentRepository
from app.modules.hospitals.repository import HospitalRepository
from app.modules.hospitals.schemas import HospitalDetail, HospitalListItem, HospitalOut, HospitalAppointmentSlot
from app.modules.hospitals.views import build_search_page

logger = logging.getLogger(__name__)

class HospitalService:
    def __init__(self, session: AsyncSession, clock: Clock):
        self.session = session
        self.clock = clock
        self.repo = HospitalRepository(session, clock)
        self.appointments = AppointmentRepository(session, clock)

    async def list_hospitals(
        self,
        *,
        city: str | None = None,
        state: str | None = None,
        specialty: str | None = None,
        latitude: float | None = None,
        longitude: float | None = None,
        radius_km: float | None = None,
        page: int = 1,
        page_size: int = 20,
    ) -> Page[HospitalListItem]:
        hospitals, total = await self.repo.list_filtered(
            city=city,
            state=state,
            specialty=specialty,
            offset=page_offset(page, page_size),
            limit=page_size,
        )
        return build_search_page(
            hospitals, total, page, page_size,
            latitude=latitude, longitude=longitude, radius_km=radius_km,
        )

    async def search(self, query: str) -> list[HospitalOut]:
        query = (query or "").strip()
        if not query:
            raise InvalidArgument("Search query is required")
        hospitals = await self.repo.search(query, limit=20)
        return [HospitalOut.model_validate(h) for h in hospitals]

    async def get(self, hospital_id: uuid.UUID) -> HospitalDetail:
        hospital = await self.repo.get_active(hospital_id)
        if not hospital:
            raise NotFound("Hospital")
        upcoming = await self.appointments.upcoming_for_hospital(hospital_id, self.clock.now(), limit=10)
        return HospitalDetail(
            **HospitalOut.model_validate(hospital).model_dump(),
            created_at=hospital.created_at,
            updated_at=hospital.updated_at,
            upcoming_appointments=[HospitalAppointmentSlot.model_validate(a) for a in upcoming],
        )
