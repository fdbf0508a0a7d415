"""API Layer: FastAPI routes, request dependencies, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Success bodies are JSON; error bodies are plain text

Design Decisions:
    - Thin routes delegate to DomainLedger instances
"""
