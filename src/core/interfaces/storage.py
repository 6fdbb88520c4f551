"""
Abstract interfaces for storage providers.

The insight pipeline is pure and never touches these; consumers use
them to remember which insight ids the user has dismissed.
"""

from abc import ABC, abstractmethod


class IKeyValueStore(ABC):
    """
    Abstract interface for a local string key-value store.

    Values are opaque text; callers own their encoding.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Get the raw value stored under key, or None if absent."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any existing value."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove key. Returns True if something was removed."""
        pass


class IDismissalStore(ABC):
    """
    Abstract interface for the set of dismissed insight ids.

    No atomicity across concurrent writers: last writer wins.
    """

    @abstractmethod
    async def get_dismissed_ids(self) -> set[str]:
        """Get the dismissed ids. Corrupt or missing data reads as empty."""
        pass

    @abstractmethod
    async def dismiss(self, insight_id: str) -> None:
        """Mark one insight id as dismissed."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Forget all dismissals."""
        pass
