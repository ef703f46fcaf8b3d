"""Route test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness check sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (MySQL-specific duplicate-key codes covered in infrastructure tests)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

import lifelink.models  # noqa: F401
from lifelink.db.base import Base
from lifelink.infrastructure.database import get_db, DatabaseSessionManager
import lifelink.infrastructure.database as db_module
from lifelink.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory

    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def make_login():
    """Build a valid POST /users body; keyword overrides replace fields."""
    def _make(**overrides) -> dict:
        body = {
            "userId": "firebase-uid-1",
            "email": "nimal@example.com",
            "loginMethod": "google",
            "activityType": "login",
        }
        body.update(overrides)
        return body
    return _make


@pytest.fixture
def make_donor():
    """Build a valid POST /donors body; keyword overrides replace fields."""
    def _make(**overrides) -> dict:
        body = {
            "fullName": "Nimal Perera",
            "email": "nimal@example.com",
            "phone": "0771234567",
            "dateOfBirth": "1990-05-01",
            "bloodType": "O+",
            "weight": "72.5",
            "gender": "male",
            "district": "Colombo",
            "area": "Maharagama",
            "address": "12 Temple Road",
            "emergencyContact": "0719876543",
            "terms": True,
        }
        body.update(overrides)
        return body
    return _make
