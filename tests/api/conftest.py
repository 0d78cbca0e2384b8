"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB sessions
    - Tokens are signed with the secret set in the root conftest

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares the one connection,
      so rows committed by a request are visible to the next one
    - seed_* fixtures go through the API so derived data is maintained as in production
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from trisog.db.base import Base
from trisog.infrastructure.database import get_db
from trisog.main import app
import trisog.models  # noqa: F401

from tests.api.payloads import (
    auth, category_payload, destination_payload, experience_payload,
    plan_payload,
)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
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
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def headers():
    return auth()


@pytest.fixture
async def seed_destination(client, headers):
    res = await client.post(
        "/api/v1/destinations", json=destination_payload(), headers=headers,
    )
    assert res.status_code == 201, res.text
    return res.json()


@pytest.fixture
async def seed_category(client, headers):
    res = await client.post(
        "/api/v1/categories", json=category_payload(), headers=headers,
    )
    assert res.status_code == 201, res.text
    return res.json()


@pytest.fixture
async def seed_plan(client, headers):
    res = await client.post(
        "/api/v1/plans", json=plan_payload(), headers=headers,
    )
    assert res.status_code == 201, res.text
    return res.json()


@pytest.fixture
async def seed_experience(client, headers, seed_destination, seed_category, seed_plan):
    res = await client.post(
        "/api/v1/experiences",
        json=experience_payload(
            seed_destination["id"],
            categories_id=[seed_category["id"]],
            plans_id=[seed_plan["id"]],
        ),
        headers=headers,
    )
    assert res.status_code == 201, res.text
    return res.json()
