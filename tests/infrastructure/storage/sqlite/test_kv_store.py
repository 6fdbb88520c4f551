"""Tests for SQLiteKeyValueStore."""

import pytest

from src.core.exceptions import DatabaseError
from src.infrastructure.storage import KeyValueDismissalStore
from src.infrastructure.storage.sqlite import connection as conn_module
from src.infrastructure.storage.sqlite import ConnectionPool, SQLiteKeyValueStore, close_pool


class TestSQLiteKeyValueStore:
    """Tests against a migrated temporary database."""

    async def test_get_missing(self, initialized_db):
        assert await SQLiteKeyValueStore().get("missing") is None

    async def test_set_and_overwrite(self, initialized_db):
        store = SQLiteKeyValueStore()
        await store.set("k", "one")
        await store.set("k", "two")
        assert await store.get("k") == "two"

    async def test_delete(self, initialized_db):
        store = SQLiteKeyValueStore()
        await store.set("k", "v")

        assert await store.delete("k") is True
        assert await store.delete("k") is False
        assert await store.get("k") is None

    async def test_values_survive_new_pool(self, initialized_db):
        await SQLiteKeyValueStore().set("k", "v")
        await close_pool()

        conn_module._pool = ConnectionPool(initialized_db, pool_size=1)
        assert await SQLiteKeyValueStore().get("k") == "v"

    async def test_dismissals_persist(self, initialized_db):
        store = KeyValueDismissalStore(SQLiteKeyValueStore())
        await store.dismiss("cashflow_negative")
        await store.dismiss("tax_underfunded")

        reopened = KeyValueDismissalStore(SQLiteKeyValueStore())
        assert await reopened.get_dismissed_ids() == {"cashflow_negative", "tax_underfunded"}

    async def test_missing_table_raises_database_error(self, temp_db_path):
        conn_module._pool = ConnectionPool(temp_db_path, pool_size=1)
        try:
            with pytest.raises(DatabaseError) as exc_info:
                await SQLiteKeyValueStore().get("k")
            assert exc_info.value.details["operation"] == "kv_get"
        finally:
            await close_pool()
