"""
Shared pytest fixtures.

Every test gets a fresh in-memory SQLite database (aiosqlite, one shared
connection) with tables created from the ORM metadata, and a FixedClock so
ages, "upcoming" and timestamps are deterministic.
"""

import itertools
import os
from datetime import date, datetime
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Ensure test configuration before the app modules read settings
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["DB_MANAGE"] = "skip"
os.environ["ENV"] = "dev"

from app.core.base import Base  # noqa: E402
from app.core.clock import FixedClock, get_clock  # noqa: E402
from app.core.db import _register_models, get_session  # noqa: E402
from app.modules.appointments.repository import AppointmentRepository  # noqa: E402
from app.modules.chatbot.repository import ConversationRepository  # noqa: E402
from app.modules.children.repository import ChildRepository  # noqa: E402
from app.modules.community.repository import CommentRepository, PostRepository  # noqa: E402
from app.modules.hospitals.repository import HospitalRepository  # noqa: E402
from app.modules.medical_records.repository import MedicalRecordRepository  # noqa: E402
from app.modules.users.repository import UserRepository  # noqa: E402

NOW = datetime(2024, 7, 15, 9, 0, 0)


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    _register_models()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def clock() -> FixedClock:
    """Frozen at 2024-07-15 09:00 UTC; tests may move `clock.at`."""
    return FixedClock(NOW)


# ============================================================================
# HTTP FIXTURES
# ============================================================================


@pytest_asyncio.fixture
async def client(session_factory, clock) -> AsyncGenerator[AsyncClient, None]:
    from app.main import app

    async def override_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_clock] = lambda: clock
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


# ============================================================================
# TEST DATA
# ============================================================================


class Factory:
    """Persists rows through the repositories and commits each one."""

    def __init__(self, session: AsyncSession, clock: FixedClock):
        self.session = session
        self.clock = clock
        self._seq = itertools.count(1)

    async def _save(self, repo, **data):
        obj = await repo.create(**data)
        await self.session.commit()
        return obj

    async def user(self, **kw):
        n = next(self._seq)
        data = {
            "cognito_user_id": f"cognito-{n}",
            "email": f"parent{n}@famlink.in",
            "first_name": "Asha",
            "last_name": f"Rao{n}",
            "country": "India",
        }
        data.update(kw)
        return await self._save(UserRepository(self.session, self.clock), **data)

    async def child(self, parent, **kw):
        data = {
            "parent_id": parent.id,
            "first_name": "Meera",
            "last_name": parent.last_name,
            "date_of_birth": date(2024, 1, 15),
            "gender": "Female",
        }
        data.update(kw)
        return await self._save(ChildRepository(self.session, self.clock), **data)

    async def hospital(self, **kw):
        n = next(self._seq)
        data = {
            "name": f"City Hospital {n}",
            "address": f"{n} MG Road",
            "city": "Bengaluru",
            "state": "Karnataka",
            "zip_code": "560001",
            "phone_number": "+91 80 1234 5678",
            "specialties": ["Pediatrics"],
            "rating": 4.0,
            "total_reviews": 10,
        }
        data.update(kw)
        return await self._save(HospitalRepository(self.session, self.clock), **data)

    async def record(self, child, **kw):
        data = {
            "child_id": child.id,
            "record_type": "Checkup",
            "title": "Routine checkup",
            "record_date": datetime(2024, 6, 1, 10, 0),
            "doctor_name": "Dr. Iyer",
        }
        data.update(kw)
        return await self._save(MedicalRecordRepository(self.session, self.clock), **data)

    async def appointment(self, user, hospital, **kw):
        data = {
            "user_id": user.id,
            "hospital_id": hospital.id,
            "appointment_date": datetime(2024, 8, 1, 10, 0),
            "appointment_type": "GeneralCheckup",
            "status": "Scheduled",
        }
        data.update(kw)
        return await self._save(AppointmentRepository(self.session, self.clock), **data)

    async def post(self, user, **kw):
        data = {"user_id": user.id, "title": "Teething tips?", "content": "What helped your baby?", "category": "Parenting"}
        data.update(kw)
        return await self._save(PostRepository(self.session, self.clock), **data)

    async def comment(self, post, user, **kw):
        data = {"post_id": post.id, "user_id": user.id, "content": "Cold teething rings."}
        data.update(kw)
        return await self._save(CommentRepository(self.session, self.clock), **data)

    async def conversation(self, user, **kw):
        data = {"user_id": user.id, "session_id": "session-1", "messages": []}
        data.update(kw)
        return await self._save(ConversationRepository(self.session, self.clock), **data)


@pytest.fixture
def factory(session, clock) -> Factory:
    return Factory(session, clock)
