"""Ledger Registry: lazily creates and caches one DomainLedger per domain.

Invariants:
    - get() for the same domain always returns the same DomainLedger instance
    - Ledgers are keyed by LedgerId (derived from the domain name), never evicted
    - Lookup-or-create has no await point, so two requests can never build
      two ledgers for one domain

Design Decisions:
    - Module-level singleton initialized in the lifespan over the SQL store
    - get_ledger_registry() is a FastAPI dependency so tests can override it
"""

import logging

from domain_offers.core.domain_types import (
    DomainName, LedgerId, StorageKey, ledger_id_for,
)
from domain_offers.core.repository_protocols import KeyValueStore
from domain_offers.services.domain_ledger import DomainLedger

logger = logging.getLogger(__name__)

# Never written; outside both the "domain:" and "requests:" key spaces
READINESS_KEY = StorageKey("readiness:probe")


class LedgerRegistry:
    """Process-lifetime cache of DomainLedger instances."""

    def __init__(self, store: KeyValueStore):
        self._store = store
        self._ledgers: dict[LedgerId, DomainLedger] = {}

    def get(self, domain: DomainName) -> DomainLedger:
        ledger_id = ledger_id_for(domain)
        ledger = self._ledgers.get(ledger_id)
        if ledger is None:
            ledger = DomainLedger(domain, self._store)
            self._ledgers[ledger_id] = ledger
            logger.info(
                "Ledger created",
                extra={"domain": domain, "ledger_id": str(ledger_id)},
            )
        return ledger

    async def ping(self) -> None:
        """Round-trip a read to the shared store; raises StorageError when it is down."""
        await self._store.get(READINESS_KEY)

    def __len__(self) -> int:
        return len(self._ledgers)


# Singleton (initialized on startup)
ledger_registry: LedgerRegistry | None = None


def init_ledgers(store: KeyValueStore) -> LedgerRegistry:
    global ledger_registry
    ledger_registry = LedgerRegistry(store)
    return ledger_registry


def get_ledger_registry() -> LedgerRegistry:
    """FastAPI dependency for the ledger registry."""
    if ledger_registry is None:
        raise RuntimeError("Ledger registry not initialized")
    return ledger_registry
