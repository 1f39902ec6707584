import logging
import uuid
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.clock import Clock
from app.core.config import settings
from app.core.errors import Conflict, NotFound
from app.modules.children.repository import ChildRepository
from app.modules.users.models import User
from app.modules.users.repository import UserRepository
from app.modules.users.schemas import UserCreate, UserUpdate, UserOut, UserListItem
from app.modules.users.views import UserDetail, build_user_detail

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, session: AsyncSession, clock: Clock):
        self.session = session
        self.clock = clock
        self.repo = UserRepository(session, clock)
        self.children = ChildRepository(session, clock)

    async def list_users(self) -> list[UserListItem]:
        users = await self.repo.list_all_active()
        counts = await self.children.active_counts_by_parent(u.id for u in users)
        return [
            UserListItem.model_validate(u).model_copy(update={"children_count": counts.get(u.id, 0)})
            for u in users
        ]

    async def get(self, user_id: uuid.UUID) -> UserDetail:
        user = await self.repo.get_active(user_id)
        if not user:
            raise NotFound("User")
        return await self._detail(user)

    async def get_by_cognito_id(self, cognito_user_id: str) -> UserDetail:
        user = await self.repo.find_by_cognito_id(cognito_user_id)
        if not user or not user.is_active:
            raise NotFound("User")
        return await self._detail(user)

    async def create(self, payload: UserCreate) -> UserOut:
        # uniqueness spans inactive users too
        if await self.repo.find_by_cognito_id(payload.cognito_user_id):
            raise Conflict("User with this Cognito ID already exists")
        if await self.repo.find_by_email(payload.email):
            raise Conflict("User with this email already exists")
        data = payload.model_dump()
        data["country"] = data.get("country") or settings.DEFAULT_COUNTRY
        user = await self.repo.create(**data)
        await self.session.commit()
        logger.info(f"Created user {user.id}")
        return UserOut.model_validate(user)

    async def update(self, user_id: uuid.UUID, payload: UserUpdate) -> UserOut:
        user: User | None = await self.repo.get_active(user_id)
        if not user:
            raise NotFound("User")
        await self.repo.update(user, **payload.model_dump(exclude_unset=True))
        await self.session.commit()
        return UserOut.model_validate(user)

    async def delete(self, user_id: uuid.UUID) -> None:
        if not await self.repo.soft_delete(user_id):
            raise NotFound("User")
        await self.session.commit()
        logger.info(f"Deactivated user {user_id}")

    async def _detail(self, user: User) -> UserDetail:
        children = await self.children.list_for_parent(user.id)
        return build_user_detail(user, children, self.clock.today())
