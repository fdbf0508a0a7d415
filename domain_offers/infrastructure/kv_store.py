"""SQL Key-Value Store: durable get/put over the kv_entries table.

Invariants:
    - get() of an absent key returns None (callers supply their own default)
    - put() replaces the whole value for a key in a single committed transaction
    - Every SQLAlchemy failure surfaces as StorageError (via DatabaseSessionManager)
    - No retries: a failed put leaves the previous value intact

Design Decisions:
    - Structurally implements core.repository_protocols.KeyValueStore
    - A fresh session per call: ledgers hold no DB state between operations
"""

import logging
from typing import Any

from domain_offers.core.domain_types import StorageKey
from domain_offers.infrastructure.database import DatabaseSessionManager
from domain_offers.models.kv_entry import KeyValueEntry

logger = logging.getLogger(__name__)


class SqlKeyValueStore:
    """KeyValueStore backed by a single SQL table."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def get(self, key: StorageKey) -> Any | None:
        async with self._manager.session() as db:
            entry = await db.get(KeyValueEntry, key)
            return entry.value if entry is not None else None

    async def put(self, key: StorageKey, value: Any) -> None:
        async with self._manager.session() as db:
            entry = await db.get(KeyValueEntry, key)
            if entry is None:
                db.add(KeyValueEntry(key=key, value=value))
            else:
                entry.value = value
            await db.commit()
        logger.debug(f"Stored {key}")
