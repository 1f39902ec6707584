import uuid
from typing import Any, Generic, Iterable, Sequence, TypeVar
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.base import CreatedMixin, TimestampedMixin
from app.core.clock import Clock, SystemClock
from app.core.errors import Conflict

ModelT = TypeVar("ModelT", bound=CreatedMixin)
SoftModelT = TypeVar("SoftModelT", bound=TimestampedMixin)


class Repository(Generic[ModelT]):
    """Id lookups and writes for one entity. Timestamps come from the injected clock."""

    model: type[ModelT]

    def __init__(self, session: AsyncSession, clock: Clock | None = None):
        self.session = session
        self.clock = clock or SystemClock()

    async def create(self, **data) -> ModelT:
        now = self.clock.now()
        obj = self.model(**data)
        obj.created_at = now
        if hasattr(obj, "updated_at"):
            obj.updated_at = now
        self.session.add(obj)
        await self._flush()
        return obj

    async def get(self, obj_id: uuid.UUID) -> ModelT | None:
        return await self.session.get(self.model, obj_id)

    async def get_many(self, ids: Iterable[uuid.UUID | None]) -> dict[uuid.UUID, ModelT]:
        wanted = {i for i in ids if i is not None}
        if not wanted:
            return {}
        res = await self.session.execute(select(self.model).where(self.model.id.in_(wanted)))
        return {obj.id: obj for obj in res.scalars().all()}

    async def update(self, obj: ModelT, **data) -> ModelT:
        # patch semantics: None means "leave as is"
        for k, v in data.items():
            if v is not None:
                setattr(obj, k, v)
        if hasattr(obj, "updated_at"):
            obj.updated_at = self.clock.now()
        await self._flush()
        return obj

    async def delete(self, obj: ModelT) -> None:
        await self.session.delete(obj)
        await self._flush()

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise Conflict(f"{self.model.__name__} conflicts with an existing record") from exc


class SoftDeleteRepository(Repository[SoftModelT]):
    """Adds active-only reads and soft delete. List reads never see inactive rows."""

    async def get_active(self, obj_id: uuid.UUID) -> SoftModelT | None:
        q = select(self.model).where(self.model.id == obj_id, self.model.is_active.is_(True))
        res = await self.session.execute(q)
        return res.scalar_one_or_none()

    async def count(self, *conditions) -> int:
        q = select(func.count()).select_from(self.model).where(self.model.is_active.is_(True), *conditions)
        res = await self.session.execute(q)
        return res.scalar_one()

    async def list_active(
        self,
        *conditions,
        order_by: Sequence[Any] = (),
        offset: int = 0,
        limit: int | None = None,
    ) -> tuple[Sequence[SoftModelT], int]:
        total = await self.count(*conditions)
        q = select(self.model).where(self.model.is_active.is_(True), *conditions).order_by(*order_by)
        if offset:
            q = q.offset(offset)
        if limit is not None:
            q = q.limit(limit)
        res = await self.session.execute(q)
        return res.scalars().all(), total

    async def soft_delete(self, obj_id: uuid.UUID) -> bool:
        obj = await self.get(obj_id)
        if not obj:
            return False
        if obj.is_active:
            obj.is_active = False
            obj.updated_at = self.clock.now()
            await self._flush()
        return True


def icontains(column, needle: str):
    """Case-insensitive substring match with LIKE wildcards escaped."""
    return func.lower(column).contains(needle.lower(), autoescape=True)
