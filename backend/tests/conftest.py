"""Root conftest — shared test configuration and store fixtures.

Invariants:
    - Tests never reach a real database: the remote store is in-memory SQLite
    - Every test gets fresh stores (no state shared between tests)
"""

import os

import pytest

os.environ.setdefault("DATABASE_URL", "")
os.environ.setdefault("USE_LOCAL_STORAGE", "true")
os.environ.setdefault("LOG_FORMAT", "text")

from showcase.db.base import Base  # noqa: E402
import showcase.models  # noqa: E402,F401
from showcase.infrastructure.database import DatabaseSessionManager  # noqa: E402
from showcase.infrastructure.key_value_store import InMemoryKeyValueStore  # noqa: E402
from showcase.infrastructure.local_use_case_store import LocalUseCaseStore  # noqa: E402
from showcase.infrastructure.sql_use_case_store import SqlUseCaseStore  # noqa: E402


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
def kv_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def local_store(kv_store):
    return LocalUseCaseStore(kv_store)


@pytest.fixture
def sql_store(db_manager):
    return SqlUseCaseStore(db_manager)
