"""Services Layer: per-domain ledgers and their registry.

Invariants:
    - Services depend on core protocols, never on concrete storage
    - All ledger access goes through LedgerRegistry.get()

Design Decisions:
    - One ledger object per domain: the unit of serialization is the domain
"""
