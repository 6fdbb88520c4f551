"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

from src.infrastructure.storage.sqlite import connection as conn_module
from src.infrastructure.storage.sqlite.connection import ConnectionPool, close_pool
from src.infrastructure.storage.sqlite.migrations import initialize_database


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
async def initialized_db(temp_db_path: Path) -> AsyncGenerator[Path, None]:
    """Migrated database installed as the global pool."""
    await initialize_database(temp_db_path)
    conn_module._pool = ConnectionPool(temp_db_path, pool_size=1)
    yield temp_db_path
    await close_pool()
