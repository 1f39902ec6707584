from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from .config import settings
from .base import Base

engine = create_async_engine(settings.DATABASE_URL, pool_pre_ping=True)
SessionLocal = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

async def get_session():
    async with SessionLocal() as session:
        yield session

def _register_models():
    # every module's tables must be on Base.metadata before create_all
    import app.modules.users.models  # noqa: F401
    import app.modules.children.models  # noqa: F401
    import app.modules.medical_records.models  # noqa: F401
    import app.modules.hospitals.models  # noqa: F401
    import app.modules.appointments.models  # noqa: F401
    import app.modules.community.models  # noqa: F401
    import app.modules.chatbot.models  # noqa: F401

async def init_models():
    ## In dev-only "create_all" mode create tables; otherwise, migrations own the schema.
    if settings.DB_MANAGE.lower() == "create_all":
        _register_models()
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
