"""Static CORS: fixed header set on every response, preflight answered before auth.

Invariants:
    - Every response carries the same four Access-Control-* headers
    - OPTIONS on any path returns 204 with an empty body and never reaches a route
    - Allowed origin and max-age come from Settings; methods and headers are fixed

Design Decisions:
    - Own middleware over Starlette's CORSMiddleware: that one only decorates
      requests carrying an Origin header, and browsers need the headers on
      401/400 responses too
    - cors_headers() exported so the catch-all 500 handler (outside this
      middleware) can attach the same set
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from domain_offers.config import Settings

ALLOWED_METHODS = "GET,HEAD,POST,OPTIONS"
ALLOWED_HEADERS = "Content-Type,Authorization"


def cors_headers(settings: Settings) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": settings.cors_allowed_origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        "Access-Control-Max-Age": str(settings.cors_max_age),
    }


class StaticCORSMiddleware(BaseHTTPMiddleware):
    """Answers preflight requests and stamps CORS headers on all other responses."""

    def __init__(self, app: ASGIApp, settings: Settings):
        super().__init__(app)
        self._headers = cors_headers(settings)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=self._headers)
        response = await call_next(request)
        response.headers.update(self._headers)
        return response
