"""Service test fixtures: in-memory stores for ledger tests.

Invariants:
    - yielding_store hands control back to the event loop inside every get/put,
      so any unserialized read-modify-write would interleave and lose data
    - yielding_store records every call in order for sequencing assertions

Design Decisions:
    - Plain dict store over the SQL store for concurrency tests: the shared
      in-memory SQLite connection is not the thing under test
"""

import asyncio

import pytest


class YieldingStore:
    """Dict-backed KeyValueStore that yields to the loop on every access."""

    def __init__(self):
        self.data: dict = {}
        self.calls: list[tuple[str, str]] = []

    async def get(self, key):
        self.calls.append(("get", key))
        await asyncio.sleep(0)
        return self.data.get(key)

    async def put(self, key, value):
        self.calls.append(("put", key))
        await asyncio.sleep(0)
        self.data[key] = value


@pytest.fixture
def yielding_store():
    return YieldingStore()
