"""Test configuration and fixtures"""

import os

# Settings are read at import time
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from seatkit.main import app
from seatkit.database import Base, get_db


# Test database URL (use in-memory SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_db():
    """Create test database"""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def client(test_db):
    """Create test client with overridden database"""
    async def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def reservation_payload():
    """A valid create request body"""
    return {
        "date": "2025-01-15T19:00:00Z",
        "duration": 90,
        "customer": {
            "name": "Jane Doe",
            "phone": "+1-555-123-4567",
            "email": "jane@example.com",
        },
        "partySize": 4,
        "category": "dinner",
        "createdBy": "host-1",
    }


@pytest.fixture
async def test_reservation(client, reservation_payload):
    """Create a reservation through the API"""
    response = await client.post("/api/reservations", json=reservation_payload)
    assert response.status_code == 201
    return response.json()["reservation"]


@pytest.fixture
def table_data():
    """A valid stored table"""
    return {
        "id": "6f1c1b0e-8d1a-4a8e-9d53-2b7f3f1f0c11",
        "createdAt": "2025-01-01T00:00:00Z",
        "updatedAt": "2025-01-01T00:00:00Z",
        "name": "Table 1",
        "minCapacity": 2,
        "maxCapacity": 6,
        "optimalCapacity": 4,
        "status": "available",
        "isActive": True,
    }
