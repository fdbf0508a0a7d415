"""Request Dependencies: settings lookup, bearer-token check, and domain extraction.

Invariants:
    - Auth runs before any other check on protected routes (router-level dependency)
    - Only "Bearer <token>" is accepted; the token must equal the configured secret
    - An empty credential is never accepted, even if the secret is empty
    - The domain is taken verbatim from the `domain` query parameter; empty means missing

Design Decisions:
    - secrets.compare_digest over ==: constant-time comparison of the shared secret
    - Settings read from app.state: the app factory owns the one immutable instance
"""

import secrets

from fastapi import Depends, Query, Request

from domain_offers.config import Settings
from domain_offers.core.domain_types import DomainName
from domain_offers.core.errors import AuthenticationError, ErrorContext, MissingDomainError

BEARER_PREFIX = "Bearer "


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def require_bearer_token(
    request: Request, settings: Settings = Depends(get_app_settings),
) -> None:
    """Raise AuthenticationError unless the Authorization header carries the secret."""
    header = request.headers.get("Authorization")
    if not header or not header.startswith(BEARER_PREFIX):
        raise AuthenticationError(ErrorContext(operation="authorize"))

    credential = header.split(" ")[1]
    expected = settings.auth_token.get_secret_value()
    if not credential or not secrets.compare_digest(
        credential.encode(), expected.encode(),
    ):
        raise AuthenticationError(ErrorContext(operation="authorize"))


def require_domain(domain: str | None = Query(None)) -> DomainName:
    if not domain:
        raise MissingDomainError()
    return DomainName(domain)
