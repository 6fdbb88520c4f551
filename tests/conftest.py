"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Iterator
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from src.api.dependencies import get_dismissals
from src.api.main import app
from src.config import reset_settings
from src.infrastructure.storage import (
    InMemoryKeyValueStore,
    KeyValueDismissalStore,
    reset_dismissal_store,
)

# Monday, mid-month; every date-windowed test is anchored here.
FIXED_NOW = datetime(2026, 10, 19, 12, 0)


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture(autouse=True)
def _isolate_singletons() -> Iterator[None]:
    """Drop cached settings and stores between tests."""
    yield
    reset_settings()
    reset_dismissal_store()


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def dismissal_store(kv_store: InMemoryKeyValueStore) -> KeyValueDismissalStore:
    return KeyValueDismissalStore(kv_store)


@pytest.fixture
def client(dismissal_store: KeyValueDismissalStore) -> Iterator[TestClient]:
    """Sync test client with the dismissal store kept in memory."""
    app.dependency_overrides[get_dismissals] = lambda: dismissal_store
    yield TestClient(app)
    app.dependency_overrides.pop(get_dismissals, None)


@pytest.fixture
async def async_client(
    dismissal_store: KeyValueDismissalStore,
) -> AsyncGenerator[AsyncClient, None]:
    """Async client with the dismissal store kept in memory."""
    app.dependency_overrides[get_dismissals] = lambda: dismissal_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_dismissals, None)


@pytest.fixture
def negative_cashflow_payload() -> dict:
    """Income 100 against expenses 150, all in the current month."""
    return {
        "transactions": [
            {"id": "t1", "date": "2026-10-01", "name": "Client A", "amount": 100, "type": "income"},
            {"id": "t2", "date": "2026-10-02", "name": "Grocer", "amount": 30, "type": "expense"},
            {"id": "t3", "date": "2026-10-03", "name": "Grocer", "amount": 40, "type": "expense"},
            {"id": "t4", "date": "2026-10-04", "name": "Fuel", "amount": 40, "type": "expense"},
            {"id": "t5", "date": "2026-10-05", "name": "Fuel", "amount": 40, "type": "expense"},
        ],
        "invoices": [],
        "tax_payments": [],
        "as_of": FIXED_NOW.isoformat(),
    }
