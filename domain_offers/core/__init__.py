"""Core Layer: domain types, error hierarchy, and storage contracts. No IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (timestamps excepted)

Design Decisions:
    - Functional core separated from imperative shell
"""
