"""
Dismissed-insight store on top of any key-value store.

The set is persisted as a JSON array of strings under one fixed key.
Anything unreadable under that key is treated as "nothing dismissed".
"""

import json

from src.config import get_logger
from src.core.interfaces.storage import IDismissalStore, IKeyValueStore

logger = get_logger(__name__)

DISMISSED_INSIGHTS_KEY = "insights_dismissed_v1"


def decode_dismissed_ids(raw: str | None) -> set[str]:
    """Parse a stored payload, degrading to an empty set on any defect."""
    if not raw:
        return set()

    try:
        parsed = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        logger.warning("dismissed_insights_payload_invalid", reason="not_json")
        return set()

    if not isinstance(parsed, list):
        logger.warning("dismissed_insights_payload_invalid", reason="not_a_list")
        return set()

    return {item for item in parsed if isinstance(item, str)}


def encode_dismissed_ids(ids: set[str]) -> str:
    return json.dumps(sorted(ids))


class KeyValueDismissalStore(IDismissalStore):
    """
    IDismissalStore backed by an IKeyValueStore.

    dismiss() is read-modify-write with no locking across processes;
    concurrent writers resolve as last writer wins.
    """

    def __init__(
        self,
        kv_store: IKeyValueStore,
        key: str = DISMISSED_INSIGHTS_KEY,
    ) -> None:
        self._kv = kv_store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    async def get_dismissed_ids(self) -> set[str]:
        return decode_dismissed_ids(await self._kv.get(self._key))

    async def dismiss(self, insight_id: str) -> None:
        current = await self.get_dismissed_ids()
        if insight_id in current:
            return
        current.add(insight_id)
        await self._kv.set(self._key, encode_dismissed_ids(current))
        logger.info("insight_dismissed", insight_id=insight_id, dismissed=len(current))

    async def clear(self) -> None:
        removed = await self._kv.delete(self._key)
        logger.info("dismissed_insights_cleared", removed=removed)
