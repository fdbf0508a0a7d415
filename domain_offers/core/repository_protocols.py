"""Boundary Protocols: contracts between the ledger core and the storage shell.

Invariants:
    - Ledgers NEVER import a concrete store; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - get/put on whole JSON values: the store is a durable, per-key linearizable
      map and knows nothing about offers or counters
"""

from typing import Any, Protocol

from domain_offers.core.domain_types import StorageKey


class KeyValueStore(Protocol):
    """Contract for durable key-value persistence, implemented by shell."""
    async def get(self, key: StorageKey) -> Any | None: ...
    async def put(self, key: StorageKey, value: Any) -> None: ...
