"""
SQLite implementation of the local key-value store.

Backed by the kv_store table created in migration v001.
"""

from datetime import datetime

import aiosqlite

from src.config import get_logger
from src.core.exceptions import DatabaseError
from src.core.interfaces.storage import IKeyValueStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


class SQLiteKeyValueStore(IKeyValueStore):
    """SQLite implementation of key-value storage."""

    async def get(self, key: str) -> str | None:
        """Get the raw value for key."""
        try:
            async with get_connection() as conn:
                cursor = await conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (key,)
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise DatabaseError("kv_get", str(e)) from e
        return None if row is None else row["value"]

    async def set(self, key: str, value: str) -> None:
        """Insert or replace the value for key."""
        try:
            async with get_transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at)
                    VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (key, value, datetime.now().isoformat()),
                )
        except aiosqlite.Error as e:
            raise DatabaseError("kv_set", str(e)) from e
        logger.debug("kv_value_stored", key=key, size=len(value))

    async def delete(self, key: str) -> bool:
        """Delete key. Returns True if a row was removed."""
        try:
            async with get_transaction() as conn:
                cursor = await conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
                deleted = cursor.rowcount > 0
        except aiosqlite.Error as e:
            raise DatabaseError("kv_delete", str(e)) from e
        if deleted:
            logger.debug("kv_value_deleted", key=key)
        return deleted
