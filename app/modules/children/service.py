import logging
import uuid
from datetime import timedelta
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.clock import Clock
from app.core.errors import InvalidArgument, NotFound
from app.modules.appointments.repository import AppointmentRepository
from app.modules.children.models import Child
from app.modules.children.repository import ChildRepository
from app.modules.children.schemas import ChildCreate, ChildUpdate, ChildOut, ChildListItem
from app.modules.children.views import ChildDashboard, ChildDetail, build_child_detail, build_dashboard
from app.modules.hospitals.repository import HospitalRepository
from app.modules.medical_records.repository import MedicalRecordRepository
from app.modules.users.repository import UserRepository

logger = logging.getLogger(__name__)

RECENT_ACTIVITY_WINDOW = timedelta(days=30)

class ChildService:
    def __init__(self, session: AsyncSession, clock: Clock):
        self.session = session
        self.clock = clock
        self.repo = ChildRepository(session, clock)
        self.users = UserRepository(session, clock)
        self.records = MedicalRecordRepository(session, clock)
        self.appointments = AppointmentRepository(session, clock)
        self.hospitals = HospitalRepository(session, clock)

    async def _child(self, child_id: uuid.UUID) -> Child:
        child = await self.repo.get_active(child_id)
        if not child:
            raise NotFound("Child")
        return child

    async def list_for_parent(self, parent_id: uuid.UUID) -> list[ChildListItem]:
        if not await self.users.get_active(parent_id):
            raise NotFound("Parent")
        children = await self.repo.list_for_parent(parent_id)
        ids = [c.id for c in children]
        record_counts = await self.records.active_counts_by_child(ids)
        appointment_counts = await self.appointments.open_counts_by_child(ids)
        today = self.clock.today()
        return [
            ChildListItem.of(
                c, today,
                medical_records_count=record_counts.get(c.id, 0),
                appointments_count=appointment_counts.get(c.id, 0),
            )
            for c in children
        ]

    async def get(self, child_id: uuid.UUID) -> ChildDetail:
        child = await self._child(child_id)
        parent = await self.users.get(child.parent_id)
        recent = await self.records.recent_by_record_date(child_id, limit=5)
        upcoming = await self.appointments.upcoming_for_child(child_id, self.clock.now(), limit=3)
        hospitals = await self.hospitals.get_many(a.hospital_id for a in upcoming)
        return build_child_detail(child, parent, recent, upcoming, hospitals, self.clock.today())

    async def dashboard(self, child_id: uuid.UUID) -> ChildDashboard:
        child = await self._child(child_id)
        now = self.clock.now()
        upcoming = await self.appointments.upcoming_for_child(child_id, now, limit=3)
        recent_appointments = await self.appointments.created_since_for_child(
            child_id, now - RECENT_ACTIVITY_WINDOW, limit=5
        )
        hospitals = await self.hospitals.get_many(
            [a.hospital_id for a in upcoming] + [a.hospital_id for a in recent_appointments]
        )
        return build_dashboard(
            child,
            self.clock.today(),
            total_records=await self.records.count(self.records.model.child_id == child_id),
            last_checkup=await self.records.latest_of_type(child_id, "Checkup"),
            last_vaccination=await self.records.latest_of_type(child_id, "Vaccination"),
            upcoming=upcoming,
            recent_records=await self.records.recently_created(child_id, limit=5),
            recent_appointments=recent_appointments,
            hospitals=hospitals,
        )

    async def create(self, payload: ChildCreate) -> ChildOut:
        if not await self.users.get_active(payload.parent_id):
            logger.warning(f"Rejected child for unknown parent {payload.parent_id}")
            raise InvalidArgument("Invalid parent")
        child = await self.repo.create(**payload.model_dump())
        await self.session.commit()
        logger.info(f"Created child {child.id} for parent {child.parent_id}")
        return ChildOut.of(child, self.clock.today())

    async def update(self, child_id: uuid.UUID, payload: ChildUpdate) -> ChildOut:
        child = await self._child(child_id)
        await self.repo.update(child, **payload.model_dump(exclude_unset=True))
        await self.session.commit()
        return ChildOut.of(child, self.clock.today())

    async def delete(self, child_id: uuid.UUID) -> None:
        if not await self.repo.soft_delete(child_id):
            raise NotFound("Child")
        await self.session.commit()
        logger.info(f"Deactivated child {child_id}")
