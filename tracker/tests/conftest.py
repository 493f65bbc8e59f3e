"""
Centralized Test Configuration.
"""

import random

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from tracker.app.db.session import create_session_factory, create_tables
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.repositories.parcel_repository import ParcelRepository
from tracker.app.schemas.parcel import ParcelCreate, utc_timestamp

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Matches the per-call deadline used in production
TEST_EXEC_TIMEOUT = 5.0


@pytest.fixture
async def engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
async def file_engine(tmp_path):
    """File-backed database for tests that need several connections."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'tracker.db'}")
    await create_tables(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def repository(engine):
    return ParcelRepository(create_session_factory(engine), timeout=TEST_EXEC_TIMEOUT)


@pytest.fixture
def make_parcel():
    """Build a test parcel, optionally for a specific client."""
    def _make(client: int = 1000, **overrides) -> ParcelCreate:
        data = {
            "client": client,
            "status": ParcelStatus.REGISTERED.value,
            "address": "test",
            "created_at": utc_timestamp(),
        }
        data.update(overrides)
        return ParcelCreate(**data)

    return _make


@pytest.fixture
def random_client():
    return random.randint(1, 10_000_000)
