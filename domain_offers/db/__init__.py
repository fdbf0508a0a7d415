"""Database Infrastructure: SQLAlchemy Base shared by models and migrations.

Invariants:
    - Single async engine per process (built in the lifespan)
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite for local/dev and tests, asyncpg for PostgreSQL
"""
