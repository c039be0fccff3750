"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager replaced for code paths that bypass get_db (health check)

Design Decisions:
    - SQLite in-memory: fast, no external dependency; upsert uses SQLite's own
      ON CONFLICT so the same write path runs as on PostgreSQL
    - Helpers create sessions and players through the API, not the ORM, so
      fixtures exercise the same validation as real clients
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from blindbeer.db.base import Base
from blindbeer.infrastructure.database import get_db, DatabaseSessionManager
import blindbeer.infrastructure.database as db_module
import blindbeer.models  # noqa: F401
from blindbeer.main import app

ADMIN_PASSWORD = "hops-and-barley"


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
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def tasting(client):
    """Create a 3-beer tasting; returns the creation response body.

    The client keeps no admin cookie afterwards, so each test opts in to
    admin access through the returned token.
    """
    res = await client.post(
        "/api/v1/sessions",
        json={"name": "Friday Flight", "beer_count": 3, "admin_password": ADMIN_PASSWORD},
    )
    assert res.status_code == 201
    client.cookies.clear()
    return res.json()


@pytest.fixture
def admin_headers(tasting):
    return {"Authorization": f"Bearer {tasting['access_token']}"}


@pytest.fixture
def join(client, tasting):
    """Join the tasting by name; returns the player dict."""
    async def _join(name: str) -> dict:
        res = await client.post(
            f"/api/v1/sessions/{tasting['code']}/players", json={"name": name},
        )
        assert res.status_code in (200, 201)
        return res.json()["player"]
    return _join


@pytest.fixture
def rate(client, tasting):
    """Submit a rating for a player; returns the response."""
    async def _rate(player_id: str, beer_number: int, **body):
        return await client.put(
            f"/api/v1/sessions/{tasting['code']}/players/{player_id}"
            f"/ratings/{beer_number}",
            json=body,
        )
    return _rate
