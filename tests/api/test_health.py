"""Health Probes: liveness reports cached ledgers, readiness follows the ledger store.

Invariants:
    - Probes need no bearer token
    - /ready returns 503 when the store behind the ledgers cannot be read
    - Probes leave every domain's data untouched
"""

from domain_offers.core.errors import StorageError
from domain_offers.services.ledger_registry import (
    READINESS_KEY, LedgerRegistry, get_ledger_registry,
)


class _DownStore:
    async def get(self, key):
        raise StorageError("Connection or operational error", "execute")

    async def put(self, key, value):
        raise StorageError("Connection or operational error", "execute")


async def test_liveness_without_auth(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json() == {"status": "healthy", "ledgers": 0}


async def test_liveness_counts_cached_ledgers(client, auth_headers):
    await client.post("/requests?domain=a.com", headers=auth_headers)
    await client.post("/requests?domain=b.com", headers=auth_headers)
    res = await client.get("/api/v1/health/")
    assert res.json()["ledgers"] == 2


async def test_readiness_with_live_store(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["store"] == "healthy"


async def test_readiness_with_store_down(client, test_app):
    test_app.dependency_overrides[get_ledger_registry] = lambda: LedgerRegistry(_DownStore())
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json() == {"status": "not_ready", "reason": "store_unavailable"}


async def test_readiness_only_reads(client, kv_store):
    await client.get("/api/v1/health/ready")
    await client.get("/api/v1/health/ready")
    assert await kv_store.get(READINESS_KEY) is None


async def test_health_responses_carry_cors(client):
    res = await client.get("/api/v1/health/")
    assert res.headers["access-control-allow-origin"] == "https://offers.test"
