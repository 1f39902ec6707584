import uuid
from datetime import datetime
from typing import Iterable, Sequence
from sqlalchemy import select, func
from app.core.repository import Repository
from app.modules.appointments.models import Appointment

class AppointmentRepository(Repository[Appointment]):
    model = Appointment

    async def slot_taken(self, hospital_id: uuid.UUID, when: datetime) -> bool:
        q = select(func.count()).select_from(Appointment).where(
            Appointment.hospital_id == hospital_id,
            Appointment.appointment_date == when,
            Appointment.status != "Cancelled",
        )
        res = await self.session.execute(q)
        return res.scalar_one() > 0

    async def upcoming_for_child(self, child_id: uuid.UUID, now: datetime, limit: int = 3) -> Sequence[Appointment]:
        q = (
            select(Appointment)
            .where(
                Appointment.child_id == child_id,
                Appointment.appointment_date > now,
                Appointment.status != "Cancelled",
            )
            .order_by(Appointment.appointment_date.asc())
            .limit(limit)
        )
        res = await self.session.execute(q)
        return res.scalars().all()

    async def created_since_for_child(self, child_id: uuid.UUID, since: datetime, limit: int = 5) -> Sequence[Appointment]:
        q = (
            select(Appointment)
            .where(Appointment.child_id == child_id, Appointment.created_at >= since)
            .order_by(Appointment.created_at.desc())
            .limit(limit)
        )
        res = await self.session.execute(q)
        return res.scalars().all()

    async def upcoming_for_hospital(self, hospital_id: uuid.UUID, now: datetime, limit: int = 10) -> Sequence[Appointment]:
        q = (
            select(Appointment)
            .where(Appointment.hospital_id == hospital_id, Appointment.appointment_date >= now)
            .order_by(Appointment.appointment_date.asc())
            .limit(limit)
        )
        res = await self.session.execute(q)
        return res.scalars().all()

    async def open_counts_by_child(self, child_ids: Iterable[uuid.UUID]) -> dict[uuid.UUID, int]:
        """Non-cancelled appointment count per child."""
        ids = list(child_ids)
        if not ids:
            return {}
        q = (
            select(Appointment.child_id, func.count())
            .where(Appointment.child_id.in_(ids), Appointment.status != "Cancelled")
            .group_by(Appointment.child_id)
        )
        res = await self.session.execute(q)
        return {child_id: n for child_id, n in res.all()}
