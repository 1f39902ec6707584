import uuid
from datetime import datetime
from typing import Iterable, Sequence
from sqlalchemy import select, func
from app.core.repository import SoftDeleteRepository
from app.modules.medical_records.models import MedicalRecord

class MedicalRecordRepository(SoftDeleteRepository[MedicalRecord]):
    model = MedicalRecord

    async def list_for_child(
        self,
        child_id: uuid.UUID,
        *,
        record_type: str | None = None,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> tuple[Sequence[MedicalRecord], int]:
        conditions = [MedicalRecord.child_id == child_id]
        if record_type:
            conditions.append(MedicalRecord.record_type == record_type)
        if from_date is not None:
            conditions.append(MedicalRecord.record_date >= from_date)
        if to_date is not None:
            conditions.append(MedicalRecord.record_date <= to_date)
        return await self.list_active(
            *conditions,
            order_by=(MedicalRecord.record_date.desc(),),
            offset=offset,
            limit=limit,
        )

    async def recent_by_record_date(self, child_id: uuid.UUID, limit: int = 5) -> Sequence[MedicalRecord]:
        items, _ = await self.list_active(
            MedicalRecord.child_id == child_id,
            order_by=(MedicalRecord.record_date.desc(),),
            limit=limit,
        )
        return items

    async def recently_created(self, child_id: uuid.UUID, limit: int = 5) -> Sequence[MedicalRecord]:
        items, _ = await self.list_active(
            MedicalRecord.child_id == child_id,
            order_by=(MedicalRecord.created_at.desc(),),
            limit=limit,
        )
        return items

    async def latest_of_type(self, child_id: uuid.UUID, record_type: str) -> MedicalRecord | None:
        items, _ = await self.list_active(
            MedicalRecord.child_id == child_id,
            MedicalRecord.record_type == record_type,
            order_by=(MedicalRecord.record_date.desc(),),
            limit=1,
        )
        return items[0] if items else None

    async def counts_by_type(self, child_id: uuid.UUID) -> dict[str, int]:
        q = (
            select(MedicalRecord.record_type, func.count())
            .where(MedicalRecord.child_id == child_id, MedicalRecord.is_active.is_(True))
            .group_by(MedicalRecord.record_type)
        )
        res = await self.session.execute(q)
        return {record_type: n for record_type, n in res.all()}

    async def active_counts_by_child(self, child_ids: Iterable[uuid.UUID]) -> dict[uuid.UUID, int]:
        ids = list(child_ids)
        if not ids:
            return {}
        q = (
            select(MedicalRecord.child_id, func.count())
            .where(MedicalRecord.child_id.in_(ids), MedicalRecord.is_active.is_(True))
            .group_by(MedicalRecord.child_id)
        )
        res = await self.session.execute(q)
        return {child_id: n for child_id, n in res.all()}
