"""Offer Routes: submit and list offers for the domain named in the query string.

Invariants:
    - Check order: bearer token -> domain parameter -> body (POST only)
    - POST appends exactly one offer; every other method is a read
    - Presence failures answer "Email and amount are required"; anything that
      cannot be read as an offer object answers "Invalid request body"
    - Routes never touch storage directly (delegate to the DomainLedger)

Design Decisions:
    - Body parsed by hand instead of a Pydantic body parameter: the 400 messages
      are part of the public contract and must not be FastAPI's validation envelope
    - Non-POST methods other than GET/HEAD are accepted as reads for clients
      that never got the method list right
"""

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from domain_offers.api.dependencies import require_bearer_token, require_domain
from domain_offers.core.domain_types import DomainName
from domain_offers.core.errors import ErrorContext, InvalidOfferError
from domain_offers.schemas.offer import OfferListing, OfferSubmission
from domain_offers.services.ledger_registry import LedgerRegistry, get_ledger_registry

logger = logging.getLogger(__name__)
router = APIRouter(tags=["offers"], dependencies=[Depends(require_bearer_token)])

# Every standard method except POST and OPTIONS; CONNECT never reaches an app route
READ_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE", "TRACE"]


def parse_offer_submission(raw: bytes, domain: DomainName) -> OfferSubmission:
    """Decode a POST body into an OfferSubmission or raise InvalidOfferError."""
    context = ErrorContext(domain=domain, operation="append_offer")
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise InvalidOfferError(InvalidOfferError.MALFORMED_BODY, context)
    if not isinstance(payload, dict):
        raise InvalidOfferError(InvalidOfferError.MALFORMED_BODY, context)

    if not payload.get("email") or not payload.get("amount"):
        raise InvalidOfferError(InvalidOfferError.MISSING_FIELDS, context)

    try:
        return OfferSubmission.model_validate(payload)
    except ValidationError as e:
        context.debug_info = {"errors": e.errors(include_url=False)}
        raise InvalidOfferError(InvalidOfferError.MALFORMED_BODY, context)


@router.post("/")
async def submit_offer(
    request: Request,
    domain: DomainName = Depends(require_domain),
    registry: LedgerRegistry = Depends(get_ledger_registry),
):
    """Append an offer to the domain's OfferLog."""
    submission = parse_offer_submission(await request.body(), domain)
    receipt = await registry.get(domain).append_offer(submission)
    return JSONResponse(receipt.to_wire())


@router.api_route("/", methods=READ_METHODS)
async def list_offers(
    domain: DomainName = Depends(require_domain),
    registry: LedgerRegistry = Depends(get_ledger_registry),
):
    """Return every offer recorded for the domain, oldest first."""
    offers = await registry.get(domain).list_offers()
    return JSONResponse(OfferListing(domain=domain, offers=offers).to_wire())
