"""Infrastructure Layer: storage, CORS, and logging plumbing.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every storage failure is mapped to StorageError before it leaves this layer

Design Decisions:
    - Concrete stores satisfy core protocols structurally (no inheritance)
"""
