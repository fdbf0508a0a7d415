"""Health Probes: liveness and ledger-store readiness, no bearer token required.

Invariants:
    - GET /api/v1/health/ answers 200 while the process runs and reports how
      many domain ledgers are cached
    - GET /api/v1/health/ready reads through the same store the ledgers use;
      503 "store_unavailable" when that read raises StorageError
    - Probes never touch any domain's offer log or request counter
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from domain_offers.core.errors import StorageError
from domain_offers.services.ledger_registry import LedgerRegistry, get_ledger_registry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness(registry: LedgerRegistry = Depends(get_ledger_registry)):
    return {"status": "healthy", "ledgers": len(registry)}


@router.get("/ready")
async def readiness(registry: LedgerRegistry = Depends(get_ledger_registry)):
    try:
        await registry.ping()
    except StorageError as e:
        logger.warning(
            "Readiness check failed",
            extra={"error_code": e.code, "operation": e.operation},
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "store_unavailable"},
        )
    return {"status": "ready", "checks": {"store": "healthy"}}
