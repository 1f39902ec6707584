import uuid
from typing import Iterable, Sequence
from sqlalchemy import select, func
from app.core.repository import SoftDeleteRepository
from app.modules.children.models import Child

class ChildRepository(SoftDeleteRepository[Child]):
    model = Child

    async def list_for_parent(self, parent_id: uuid.UUID) -> Sequence[Child]:
        items, _ = await self.list_active(Child.parent_id == parent_id, order_by=(Child.date_of_birth.asc(),))
        return items

    async def active_counts_by_parent(self, parent_ids: Iterable[uuid.UUID]) -> dict[uuid.UUID, int]:
        ids = list(parent_ids)
        if not ids:
            return {}
        q = (
            select(Child.parent_id, func.count())
            .where(Child.parent_id.in_(ids), Child.is_active.is_(True))
            .group_by(Child.parent_id)
        )
        res = await self.session.execute(q)
        return {parent_id: n for parent_id, n in res.all()}

    async def get_owned(self, child_id: uuid.UUID, parent_id: uuid.UUID) -> Child | None:
        """Active child belonging to the given parent."""
        child = await self.get_active(child_id)
        if child is None or child.parent_id != parent_id:
            return None
        return child
