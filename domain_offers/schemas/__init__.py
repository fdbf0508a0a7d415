"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - The same Offer model is used for storage and for the wire

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
