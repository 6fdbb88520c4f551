"""In-process key-value store for ephemeral sessions and tests."""

import asyncio

from src.core.interfaces.storage import IKeyValueStore


class InMemoryKeyValueStore(IKeyValueStore):
    """Dict-backed key-value store. Contents vanish with the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        async with self._lock:
            self._data[key] = value

    async def delete(self, key: str) -> bool:
        async with self._lock:
            return self._data.pop(key, None) is not None
