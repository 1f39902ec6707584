from sqlalchemy import select
from app.core.repository import SoftDeleteRepository
from app.modules.users.models import User

class UserRepository(SoftDeleteRepository[User]):
    model = User

    async def find_by_cognito_id(self, cognito_user_id: str) -> User | None:
        res = await self.session.execute(select(User).where(User.cognito_user_id == cognito_user_id))
        return res.scalar_one_or_none()

    async def find_by_email(self, email: str) -> User | None:
        res = await self.session.execute(select(User).where(User.email == email))
        return res.scalar_one_or_none()

    async def list_all_active(self):
        items, _ = await self.list_active(order_by=(User.created_at.asc(),))
        return items
