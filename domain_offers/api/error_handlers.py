"""Error Handlers: global exception handlers for the offer API.

Invariants:
    - DomainOffersError → plain-text body (exc.message) with exc.http_status
    - Exception (catch-all) → 500 "Internal server error", never leaks internal details
    - Every error response carries the CORS header set

Design Decisions:
    - Two-layer handler: domain (DomainOffersError), catch-all (Exception)
    - Plain text over a JSON envelope: browser clients read the body as a message
    - The catch-all attaches CORS headers itself: Starlette runs it outside
      every user middleware
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from domain_offers.core.errors import DomainOffersError, ErrorSeverity
from domain_offers.infrastructure.cors import cors_headers

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(DomainOffersError)
    async def domain_error_handler(request: Request, exc: DomainOffersError):
        """Handle auth, validation, and storage errors."""
        level = (
            logging.ERROR if exc.severity == ErrorSeverity.CRITICAL
            else logging.WARNING
        )
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={
                **exc.to_log_extra(),
                "path": request.url.path,
                "method": request.method,
            },
        )
        return PlainTextResponse(
            exc.message,
            status_code=exc.http_status,
            headers=cors_headers(request.app.state.settings),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return PlainTextResponse(
            INTERNAL_ERROR_MESSAGE,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            headers=cors_headers(request.app.state.settings),
        )
