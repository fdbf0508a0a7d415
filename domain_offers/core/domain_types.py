"""Domain Types: rich types and key derivation for per-domain ledgers.

Invariants:
    - DomainName is the raw `domain` query parameter, never normalized
    - Offer logs live under "domain:<name>"; request counters under "requests:<name>"
    - LedgerId is a pure function of the domain name (same name -> same id, forever)
    - Timestamps are UTC ISO-8601 with millisecond precision and a "Z" suffix

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Separate storage keys for counters and offer logs: an integer and a list can
      never overwrite each other under one key
    - UUIDv5 for LedgerId: deterministic, collision-resistant, no registry lookup
"""

from datetime import datetime, timezone
from typing import NewType
from uuid import UUID, uuid5


# ─── Identity Types ──────────────────────────────────────────────

DomainName = NewType("DomainName", str)
StorageKey = NewType("StorageKey", str)
LedgerId = NewType("LedgerId", UUID)


# ─── Key Derivation ──────────────────────────────────────────────

OFFER_LOG_PREFIX = "domain:"
REQUEST_COUNTER_PREFIX = "requests:"
LEDGER_NAME_PREFIX = "domain-offers:"

# Fixed namespace so ids survive restarts and redeploys
LEDGER_NAMESPACE = UUID("6f1c2a4e-9d0b-5e7f-8a3c-1b2d4e6f8091")


def offer_log_key(domain: DomainName) -> StorageKey:
    return StorageKey(f"{OFFER_LOG_PREFIX}{domain}")


def request_counter_key(domain: DomainName) -> StorageKey:
    return StorageKey(f"{REQUEST_COUNTER_PREFIX}{domain}")


def ledger_id_for(domain: DomainName) -> LedgerId:
    """Stable identifier used to locate or create the ledger for a domain."""
    return LedgerId(uuid5(LEDGER_NAMESPACE, f"{LEDGER_NAME_PREFIX}{domain}"))


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp, e.g. 2024-10-22T09:15:02.123Z."""
    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
