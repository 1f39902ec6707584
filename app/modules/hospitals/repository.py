import json
from typing import Sequence
from sqlalchemy import select, cast, or_, Text
from app.core.repository import SoftDeleteRepository, icontains
from app.modules.hospitals.models import Hospital

class HospitalRepository(SoftDeleteRepository[Hospital]):
    model = Hospital

    async def list_filtered(
        self,
        *,
        city: str | None = None,
        state: str | None = None,
        specialty: str | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> tuple[Sequence[Hospital], int]:
        conditions = []
        if city:
            conditions.append(icontains(Hospital.city, city))
        if state:
            conditions.append(icontains(Hospital.state, state))
        if specialty:
            # exact element of the stored JSON array
            conditions.append(cast(Hospital.specialties, Text).contains(json.dumps(specialty), autoescape=True))
        return await self.list_active(
            *conditions,
            order_by=(Hospital.rating.desc(), Hospital.name.asc()),
            offset=offset,
            limit=limit,
        )

    async def search(self, query: str, limit: int = 20) -> Sequence[Hospital]:
        items, _ = await self.list_active(
            or_(
                icontains(Hospital.name, query),
                icontains(Hospital.city, query),
                icontains(Hospital.state, query),
                icontains(cast(Hospital.specialties, Text), query),
            ),
            order_by=(Hospital.rating.desc(), Hospital.name.asc()),
            limit=limit,
        )
        return items

    async def find_by_name_city(self, name: str, city: str) -> Hospital | None:
        res = await self.session.execute(
            select(Hospital).where(Hospital.name == name, Hospital.city == city).limit(1)
        )
        return res.scalar_one_or_none()
