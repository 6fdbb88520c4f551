"""Storage infrastructure implementations."""

from src.infrastructure.storage.dismissal_store import (
    DISMISSED_INSIGHTS_KEY,
    KeyValueDismissalStore,
)
from src.infrastructure.storage.memory import InMemoryKeyValueStore
from src.infrastructure.storage.sqlite import (
    SQLiteKeyValueStore,
    close_pool,
    get_connection,
    get_kv_store,
    get_pool,
    get_transaction,
)

_dismissal_store: KeyValueDismissalStore | None = None


async def get_dismissal_store() -> KeyValueDismissalStore:
    """Get singleton dismissal store backed by SQLite."""
    global _dismissal_store
    if _dismissal_store is None:
        _dismissal_store = KeyValueDismissalStore(await get_kv_store())
    return _dismissal_store


def reset_dismissal_store() -> None:
    """Drop the cached dismissal store (for testing)."""
    global _dismissal_store
    _dismissal_store = None


__all__ = [
    # Key-value stores
    "SQLiteKeyValueStore",
    "InMemoryKeyValueStore",
    "get_kv_store",
    # Dismissals
    "DISMISSED_INSIGHTS_KEY",
    "KeyValueDismissalStore",
    "get_dismissal_store",
    "reset_dismissal_store",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
