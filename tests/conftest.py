import asyncio
import os
from collections.abc import AsyncGenerator

# The app module builds its engine at import time; keep it off PostgreSQL.
os.environ["DATABASE_DSN"] = "sqlite+aiosqlite://"

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

import hypertrophy_tracker.models  # noqa: F401 - register all models
from hypertrophy_tracker.db.base import Base
from hypertrophy_tracker.db.session import get_db
from hypertrophy_tracker.main import app
from hypertrophy_tracker.services.seed import seed_vacation_plan, seed_workout_plan

API = "/api/v1"


def make_engine(url: str) -> AsyncEngine:
    # NullPool: no connection outlives the event loop that opened it.
    return create_async_engine(url, poolclass=NullPool)


def make_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


async def prepare_database(url: str) -> None:
    engine = make_engine(url)
    maker = make_session_maker(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with maker() as session:
        await seed_workout_plan(session)
        await seed_vacation_plan(session)
        await session.commit()
    await engine.dispose()


def override_db(maker: async_sessionmaker[AsyncSession]) -> None:
    async def _get_db() -> AsyncGenerator[AsyncSession, None]:
        async with maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_db


@pytest.fixture
def db_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'tracker.db'}"


@pytest_asyncio.fixture
async def session_maker(db_url):
    await prepare_database(db_url)
    engine = make_engine(db_url)
    yield make_session_maker(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def db(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    override_db(session_maker)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def sync_client(db_url):
    """TestClient (its own event loop) for the synchronous Python client."""
    asyncio.run(prepare_database(db_url))
    override_db(make_session_maker(make_engine(db_url)))
    yield TestClient(app)
    app.dependency_overrides.clear()


async def register(client: AsyncClient, open_id: str = "lifter") -> dict[str, str]:
    """Create an account and return its auth header."""
    resp = await client.post(
        f"{API}/auth/register", json={"open_id": open_id, "password": "hunter2hunter2"}
    )
    assert resp.status_code == 201, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest_asyncio.fixture
async def auth_headers(client) -> dict[str, str]:
    return await register(client)


def refuse_connection(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("network unreachable", request=request)
