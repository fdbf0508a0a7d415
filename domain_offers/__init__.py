"""Domain Offers Application Package: per-domain offer ledger behind a bearer-token API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
