"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so readiness probes see the test engine

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares the one connection,
      so rows written through the client are visible to test_db
    - broken_client runs against an engine with no tables: every store call fails
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from exercise_tracker.db.base import Base
from exercise_tracker.infrastructure.database import get_db, DatabaseSessionManager
import exercise_tracker.infrastructure.database as db_module
import exercise_tracker.models  # noqa: F401
from exercise_tracker.main import app


def _memory_engine():
    return create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )


@pytest.fixture
async def test_engine():
    engine = _memory_engine()
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


async def _client_for(engine, session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = engine
    fake_manager._session_factory = session_factory
    db_module.db_manager = fake_manager

    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
        db_module.db_manager = original_manager


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async for c in _client_for(test_engine, test_session_factory):
        yield c


@pytest.fixture
async def broken_client():
    """Client whose store has no tables — every query raises OperationalError."""
    engine = _memory_engine()
    factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
    async for c in _client_for(engine, factory):
        yield c
    await engine.dispose()


@pytest.fixture
async def create_user(client):
    """Create a user through the API and return the response body."""
    async def _create(username: str = "alice") -> dict:
        res = await client.post("/api/users", json={"username": username})
        assert res.status_code == 201
        return res.json()

    return _create


@pytest.fixture
async def add_exercise(client):
    """Add an exercise through the API and return the response."""
    async def _add(user_id: str, **fields):
        body = {"description": "run", "duration": 30, **fields}
        return await client.post(f"/api/users/{user_id}/exercises", json=body)

    return _add
