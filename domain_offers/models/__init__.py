"""ORM Models: SQLAlchemy declarative models for persisted state.

Invariants:
    - All models inherit from Base (db/base.py)
    - Importing this package registers every table on Base.metadata

Design Decisions:
    - All models imported here so create_all and alembic autogenerate see them
"""

from domain_offers.models.kv_entry import KeyValueEntry  # noqa: F401
