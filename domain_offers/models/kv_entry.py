"""KeyValueEntry ORM: one durable row per storage key.

Invariants:
    - key is the primary key (at most one value per key)
    - value is a JSON document: an integer counter or a list of offer dicts
    - updated_at moves on every put; rows are never deleted

Design Decisions:
    - JSON column over per-offer rows: the ledger persists the whole OfferLog on
      each append, so a row per key matches the access pattern exactly
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from domain_offers.db.base import Base


class KeyValueEntry(Base):
    """Durable key-value pair backing domain ledgers."""
    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(512), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
