import logging
import uuid
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.clock import Clock
from app.core.errors import Conflict, InvalidArgument, NotFound
from app.modules.appointments.models import Appointment, APPOINTMENT_STATUSES
from app.modules.appointments.repository import AppointmentRepository
from app.modules.appointments.schemas import (
    AppointmentBook, AppointmentOut, AppointmentStatusOut, AppointmentStatusUpdate
)
from app.modules.appointments.views import build_appointment
from app.modules.children.repository import ChildRepository
from app.modules.hospitals.repository import HospitalRepository
from app.modules.users.repository import UserRepository

logger = logging.getLogger(__name__)

class AppointmentService:
    def __init__(self, session: AsyncSession, clock: Clock):
        self.session = session
        self.clock = clock
        self.repo = AppointmentRepository(session, clock)
        self.users = UserRepository(session, clock)
        self.children = ChildRepository(session, clock)
        self.hospitals = HospitalRepository(session, clock)

    async def book(self, hospital_id: uuid.UUID, payload: AppointmentBook) -> AppointmentOut:
        hospital = await self.hospitals.get_active(hospital_id)
        if not hospital:
            raise NotFound("Hospital")
        user = await self.users.get_active(payload.user_id)
        if not user:
            raise InvalidArgument("Invalid user")
        child = None
        if payload.child_id is not None:
            child = await self.children.get_owned(payload.child_id, user.id)
            if not child:
                logger.warning(f"Rejected booking: child {payload.child_id} not owned by user {user.id}")
                raise InvalidArgument("Invalid child")
        if await self.repo.slot_taken(hospital_id, payload.appointment_date):
            raise Conflict("This time slot is already booked")

        appt = await self.repo.create(hospital_id=hospital_id, status="Scheduled", **payload.model_dump())
        await self.session.commit()
        logger.info(f"Booked appointment {appt.id} at hospital {hospital_id} for {appt.appointment_date.isoformat()}")
        return build_appointment(appt, user, child, hospital, self.clock.now())

    async def get(self, appointment_id: uuid.UUID) -> AppointmentOut:
        appt = await self.repo.get(appointment_id)
        if not appt:
            raise NotFound("Appointment")
        return await self._render(appt)

    async def update_status(self, appointment_id: uuid.UUID, payload: AppointmentStatusUpdate) -> AppointmentStatusOut:
        appt: Appointment | None = await self.repo.get(appointment_id)
        if not appt:
            raise NotFound("Appointment")
        if payload.status not in APPOINTMENT_STATUSES:
            raise InvalidArgument(
                f"Unknown appointment status '{payload.status}'",
                details={"allowed": APPOINTMENT_STATUSES},
            )
        if appt.status == "Cancelled" and payload.status != "Cancelled":
            if await self.repo.slot_taken(appt.hospital_id, appt.appointment_date):
                raise Conflict("This time slot is already booked")
        # notes are only overwritten by a non-empty value
        await self.repo.update(appt, status=payload.status, notes=payload.notes or None)
        await self.session.commit()
        logger.info(f"Appointment {appt.id} moved to {appt.status}")
        return AppointmentStatusOut.model_validate(appt)

    async def _render(self, appt: Appointment) -> AppointmentOut:
        user = await self.users.get(appt.user_id)
        child = await self.children.get(appt.child_id) if appt.child_id else None
        hospital = await self.hospitals.get(appt.hospital_id)
        return build_appointment(appt, user, child, hospital, self.clock.now())
