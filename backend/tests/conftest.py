"""Shared test configuration and fixtures.

Every test gets a freshly created schema so generated IDs start at 1:
- By default a throwaway SQLite file (aiosqlite) in the test's tmp_path.
- Set ``TEST_DATABASE_URL`` to run against PostgreSQL instead; the tables
  are dropped and recreated around each test.
"""

import os
from collections.abc import AsyncGenerator

import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

import hotel_api.models  # noqa: F401  # register tables on Base.metadata
from hotel_api.config import Settings
from hotel_api.database import Base, create_schema
from hotel_api.main import create_app


def _test_database_url(tmp_path) -> str:
    return os.environ.get("TEST_DATABASE_URL") or f"sqlite+aiosqlite:///{tmp_path / 'hotel_test.db'}"


# ---------------------------------------------------------------------------
# Per-test: application with its own store
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def app(tmp_path) -> AsyncGenerator[FastAPI, None]:
    """Build an app on a fresh schema and tear the schema down afterwards."""
    application = create_app(Settings(_env_file=None, database_url=_test_database_url(tmp_path)))
    engine = application.state.engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await create_schema(engine)

    yield application

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to the test app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest_asyncio.fixture
async def db_session(app: FastAPI) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session on the test store for calling services directly."""
    async with app.state.session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


# ---------------------------------------------------------------------------
# Convenience fixtures: room and guest helpers
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_room(client: AsyncClient) -> dict:
    """Create and return a test room via the API."""
    response = await client.post("/room", json={"number": 1, "params": "five stars", "beds": 2})
    assert response.status_code == 201, f"Failed to create test room: {response.text}"
    return response.json()


@pytest_asyncio.fixture
async def test_guest(client: AsyncClient, test_room: dict) -> dict:
    """Create and return a guest staying in ``test_room``."""
    response = await client.post(
        "/guest",
        json={"name": "John", "passport": "ZZ178567", "room_id": test_room["id"]},
    )
    assert response.status_code == 201, f"Failed to create test guest: {response.text}"
    return response.json()
