"""Root conftest: shared test configuration and storage fixtures.

Invariants:
    - Tests never read a real secret or a real database URL
    - Every test gets a fresh in-memory SQLite database

Design Decisions:
    - Environment defaults set before any domain_offers import: domain_offers.main
      builds its module-level app from the environment
    - Session manager built via __new__ and pointed at the test engine: no pool kwargs,
      no lifespan needed
"""

import os

os.environ.setdefault("AUTH_TOKEN", "test-env-token")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)

from domain_offers.db.base import Base  # noqa: E402
from domain_offers.infrastructure.database import DatabaseSessionManager  # noqa: E402
from domain_offers.infrastructure.kv_store import SqlKeyValueStore  # noqa: E402
import domain_offers.models  # noqa: E402, F401


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
def test_db_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
def kv_store(test_db_manager):
    return SqlKeyValueStore(test_db_manager)
