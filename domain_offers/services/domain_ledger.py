"""Domain Ledger: per-domain unit that serializes reads and writes of its storage entries.

Invariants:
    - One ledger per domain name; every storage-touching operation holds the
      ledger's lock, so read-modify-write cycles never interleave
    - Waiters acquire the lock in arrival order (asyncio.Lock is FIFO)
    - append_offer preserves every prior entry: persisted length grows by exactly one
    - Absent counter reads as 0; absent OfferLog reads as []
    - Storage failures propagate unchanged (StorageError); no retry, no rollback

Design Decisions:
    - asyncio.Lock per ledger instead of a queue/actor task: same one-at-a-time
      guarantee, no background task lifecycle to manage
    - Offer timestamp stamped after the lock is acquired, so timestamps are
      monotonic in log order
"""

import asyncio
import logging

from domain_offers.core.domain_types import (
    DomainName, LedgerId, ledger_id_for, offer_log_key, request_counter_key,
    utc_timestamp,
)
from domain_offers.core.repository_protocols import KeyValueStore
from domain_offers.schemas.offer import Offer, OfferReceipt, OfferSubmission, RequestTally

logger = logging.getLogger(__name__)


class DomainLedger:
    """Offer log and request counter for one domain."""

    def __init__(self, domain: DomainName, store: KeyValueStore):
        self.domain = domain
        self.ledger_id: LedgerId = ledger_id_for(domain)
        self._store = store
        self._offers_key = offer_log_key(domain)
        self._requests_key = request_counter_key(domain)
        self._lock = asyncio.Lock()

    # ─── Request counter ────────────────────────────────────────

    async def track_request(self) -> RequestTally:
        """Increment the request counter by one and return the new value."""
        async with self._lock:
            count = (await self._store.get(self._requests_key) or 0) + 1
            await self._store.put(self._requests_key, count)
        logger.debug(
            "Request tracked",
            extra={"domain": self.domain, "count": count},
        )
        return RequestTally(domain=self.domain, count=count, timestamp=utc_timestamp())

    async def get_request_count(self) -> int:
        async with self._lock:
            return await self._store.get(self._requests_key) or 0

    # ─── Offer log ──────────────────────────────────────────────

    async def append_offer(self, submission: OfferSubmission) -> OfferReceipt:
        """Stamp the submission, append it to the OfferLog, persist the whole log."""
        async with self._lock:
            stored = await self._store.get(self._offers_key) or []
            offer = Offer(
                **submission.model_dump(exclude_none=True),
                timestamp=utc_timestamp(),
            )
            offers = [*stored, offer.model_dump(mode="json", exclude_none=True)]
            await self._store.put(self._offers_key, offers)

        logger.info(
            "Offer appended",
            extra={
                "domain": self.domain, "ledger_id": str(self.ledger_id),
                "total_offers": len(offers),
            },
        )
        return OfferReceipt(domain=self.domain, offer=offer, total_offers=len(offers))

    async def list_offers(self) -> list[Offer]:
        async with self._lock:
            stored = await self._store.get(self._offers_key) or []
        return [Offer.model_validate(item) for item in stored]
