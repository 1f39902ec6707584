import logging
import uuid
from datetime import datetime
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.clock import Clock, to_naive_utc
from app.core.errors import InvalidArgument, NotFound
from app.core.paging import Page, page_offset
from app.modules.children.models import Child
from app.modules.children.repository import ChildRepository
from app.modules.children.schemas import ChildSummary
from app.modules.medical_records.repository import MedicalRecordRepository
from app.modules.medical_records.schemas import (
    MedicalRecordCreate, MedicalRecordUpdate, MedicalRecordOut, MedicalRecordDetail, MedicalSummary
)
from app.modules.medical_records.views import build_medical_summary

logger = logging.getLogger(__name__)

class MedicalRecordService:
    def __init__(self, session: AsyncSession, clock: Clock):
        self.session = session
        self.clock = clock
        self.repo = MedicalRecordRepository(session, clock)
        self.children = ChildRepository(session, clock)

    async def _child(self, child_id: uuid.UUID) -> Child:
        child = await self.children.get_active(child_id)
        if not child:
            raise NotFound("Child")
        return child

    async def list_for_child(
        self,
        child_id: uuid.UUID,
        *,
        record_type: str | None = None,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        page: int = 1,
        page_size: int = 20,
    ) -> Page[MedicalRecordDetail]:
        child = await self._child(child_id)
        items, total = await self.repo.list_for_child(
            child_id,
            record_type=record_type,
            from_date=to_naive_utc(from_date) if from_date else None,
            to_date=to_naive_utc(to_date) if to_date else None,
            offset=page_offset(page, page_size),
            limit=page_size,
        )
        summary = ChildSummary.of(child, self.clock.today())
        rows = [_detail(r, summary) for r in items]
        return Page[MedicalRecordDetail].build(rows, total, page, page_size)

    async def summary(self, child_id: uuid.UUID) -> MedicalSummary:
        child = await self._child(child_id)
        return build_medical_summary(
            ChildSummary.of(child, self.clock.today()),
            await self.repo.counts_by_type(child_id),
            await self.repo.recent_by_record_date(child_id, limit=5),
            last_vaccination=await self.repo.latest_of_type(child_id, "Vaccination"),
            last_checkup=await self.repo.latest_of_type(child_id, "Checkup"),
        )

    async def get(self, record_id: uuid.UUID) -> MedicalRecordDetail:
        record = await self.repo.get_active(record_id)
        if not record:
            raise NotFound("Medical record")
        child = await self.children.get(record.child_id)
        return _detail(record, ChildSummary.of(child, self.clock.today()))

    async def create(self, payload: MedicalRecordCreate) -> MedicalRecordOut:
        if not await self.children.get_active(payload.child_id):
            logger.warning(f"Rejected medical record for unknown child {payload.child_id}")
            raise InvalidArgument("Invalid child")
        obj = await self.repo.create(**payload.model_dump())
        await self.session.commit()
        logger.info(f"Created medical record {obj.id} for child {obj.child_id}")
        return MedicalRecordOut.model_validate(obj)

    async def update(self, record_id: uuid.UUID, payload: MedicalRecordUpdate) -> MedicalRecordOut:
        record = await self.repo.get_active(record_id)
        if not record:
            raise NotFound("Medical record")
        await self.repo.update(record, **payload.model_dump(exclude_unset=True))
        await self.session.commit()
        return MedicalRecordOut.model_validate(record)

    async def delete(self, record_id: uuid.UUID) -> None:
        if not await self.repo.soft_delete(record_id):
            raise NotFound("Medical record")
        await self.session.commit()
        logger.info(f"Deactivated medical record {record_id}")


def _detail(record, child: ChildSummary) -> MedicalRecordDetail:
    return MedicalRecordDetail(**MedicalRecordOut.model_validate(record).model_dump(), child=child)
