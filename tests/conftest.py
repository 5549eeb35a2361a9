"""
Shared fixtures: a fresh in-memory SQLite database per test, with foreign
keys enforced, plus actors for each commission role.
"""
import datetime

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import ic_court.models  # noqa: F401
from ic_court.core.security import ActorContext
from ic_court.db.base import Base
from ic_court.db.session import enable_sqlite_foreign_keys, get_db
from ic_court.models.enums import DisputeType, UserRole
from ic_court.models.user import User
from ic_court.schemas import DisputeCreate, UserCreate
from ic_court.services import DisputeService, UserService


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def staff():
    return ActorContext(actor_id=1, role=UserRole.STAFF)


@pytest.fixture
def commissioner():
    return ActorContext(actor_id=1, role=UserRole.COMMISSIONER)


@pytest.fixture
def registrar():
    return ActorContext(actor_id=1, role=UserRole.REGISTRAR)


@pytest.fixture
def applicant():
    return ActorContext(actor_id=1, role=UserRole.APPLICANT)


def make_user_input(**overrides) -> UserCreate:
    data = {
        "username": "admin",
        "email": "admin@komisiinformasi.go.id",
        "full_name": "Administrator Komisi Informasi",
        "role": UserRole.STAFF,
        "phone": "+6281234567890",
        "password": "password123",
    }
    data.update(overrides)
    return UserCreate(**data)


def make_dispute_input(**overrides) -> DisputeCreate:
    data = {
        "dispute_number": "001/REG-PSI/I/2024",
        "dispute_type": DisputeType.INFORMATION_DISPUTE,
        "registration_date": datetime.datetime(2024, 1, 2, 9, 0, tzinfo=datetime.timezone.utc),
        "description": "Permohonan informasi anggaran tidak ditanggapi",
    }
    data.update(overrides)
    return DisputeCreate(**data)


@pytest_asyncio.fixture
async def admin_user(db, staff) -> User:
    """The user behind the placeholder actor (id 1)."""
    return await UserService(db).create_user(make_user_input(), staff)


@pytest_asyncio.fixture
async def dispute(db, staff, admin_user):
    return await DisputeService(db).create_dispute(make_dispute_input(), staff)


async def count_rows(db, model) -> int:
    result = await db.execute(select(func.count()).select_from(model))
    return result.scalar_one()


@pytest_asyncio.fixture
async def client(session_factory):
    from ic_court.main import app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
