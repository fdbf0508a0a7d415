"""Domain Offers API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Settings are resolved once and frozen on app.state before any request
    - CORS headers stamped on every response by StaticCORSMiddleware
    - Database, ledger registry, and logging initialized on startup via lifespan

Design Decisions:
    - create_app(settings) factory: tests build apps with their own Settings,
      `app` below serves `uvicorn domain_offers.main:app`
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from domain_offers.api.error_handlers import register_error_handlers
from domain_offers.api.routes import health, offers, request_counts
from domain_offers.config import Settings, get_settings
from domain_offers.infrastructure.cors import StaticCORSMiddleware
from domain_offers.infrastructure.database import DatabaseSessionManager
from domain_offers.infrastructure.kv_store import SqlKeyValueStore
from domain_offers.infrastructure.observability import setup_logging
from domain_offers.services.ledger_registry import init_ledgers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await manager.create_tables()
    init_ledgers(SqlKeyValueStore(manager))
    logger.info("Domain Offers API started")
    yield
    logger.info("Domain Offers API shutting down")
    await manager.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(
        title="Domain Offers API", version="1.0.0", lifespan=lifespan,
    )
    app.state.settings = settings or get_settings()

    app.add_middleware(StaticCORSMiddleware, settings=app.state.settings)
    register_error_handlers(app)

    # Explicit registration; offers last since it owns "/"
    app.include_router(health.router)
    app.include_router(request_counts.router)
    app.include_router(offers.router)
    return app


app = create_app()
