"""Request Count Routes: track and read the per-domain request counter.

Invariants:
    - Same auth and domain checks as the offer routes
    - POST increments by exactly one; GET never mutates
    - Counters never share a storage key with offer logs
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from domain_offers.api.dependencies import require_bearer_token, require_domain
from domain_offers.core.domain_types import DomainName
from domain_offers.schemas.offer import RequestTally
from domain_offers.services.ledger_registry import LedgerRegistry, get_ledger_registry

router = APIRouter(
    prefix="/requests", tags=["requests"],
    dependencies=[Depends(require_bearer_token)],
)


@router.post("")
async def track_request(
    domain: DomainName = Depends(require_domain),
    registry: LedgerRegistry = Depends(get_ledger_registry),
):
    """Record one request for the domain."""
    tally = await registry.get(domain).track_request()
    return JSONResponse(tally.to_wire())


@router.get("")
async def get_request_count(
    domain: DomainName = Depends(require_domain),
    registry: LedgerRegistry = Depends(get_ledger_registry),
):
    count = await registry.get(domain).get_request_count()
    return JSONResponse(RequestTally(domain=domain, count=count).to_wire())
