"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.storage import IDismissalStore, IKeyValueStore

__all__ = [
    "IKeyValueStore",
    "IDismissalStore",
]
