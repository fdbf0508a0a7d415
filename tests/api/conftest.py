"""API test fixtures: app built from explicit Settings + httpx client.

Invariants:
    - Every test gets its own app, registry, and in-memory SQLite store
    - get_ledger_registry overridden so no lifespan is needed

Design Decisions:
    - create_app(settings) over the module-level app: tests pin the secret and
      CORS origin without touching the environment
"""

import pytest
from httpx import ASGITransport, AsyncClient

from domain_offers.config import Settings
from domain_offers.main import create_app
from domain_offers.services.ledger_registry import LedgerRegistry, get_ledger_registry

AUTH_TOKEN = "test-secret"
ORIGIN = "https://offers.test"


@pytest.fixture
def settings():
    return Settings(
        auth_token=AUTH_TOKEN, cors_allowed_origin=ORIGIN, cors_max_age=600,
    )


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {AUTH_TOKEN}"}


@pytest.fixture
def registry(kv_store):
    return LedgerRegistry(kv_store)


@pytest.fixture
def test_app(settings, registry):
    app = create_app(settings)
    app.dependency_overrides[get_ledger_registry] = lambda: registry
    return app


@pytest.fixture
async def client(test_app):
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test",
    ) as c:
        yield c
