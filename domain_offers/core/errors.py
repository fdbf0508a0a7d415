"""Error Hierarchy: typed, categorized exceptions for every failure mode of the offer API.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) are recoverable; storage errors (500-level) are critical
    - message is the exact plain-text body sent to the client
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DomainOffersError base: one global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    domain: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class DomainOffersError(Exception):
    """Base exception for all offer API errors."""

    # Keys of to_log_extra(); the JSON log formatter surfaces each of them
    LOG_FIELDS = ("error_code", "domain", "operation")

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        values = (self.code, self.context.domain, self.context.operation)
        return dict(zip(self.LOG_FIELDS, values))


# ─── Request Errors (400-level) ─────────────────────────────────

class AuthenticationError(DomainOffersError):
    """Bearer token missing, malformed, or not equal to the configured secret."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Unauthorized", "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class MissingDomainError(DomainOffersError):
    """The `domain` query parameter is absent or empty."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Domain parameter is required", "DOMAIN_REQUIRED",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, context, 400,
        )


class InvalidOfferError(DomainOffersError):
    """Offer submission body could not be parsed or lacks required fields."""

    MISSING_FIELDS = "Email and amount are required"
    MALFORMED_BODY = "Invalid request body"

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_OFFER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(DomainOffersError):
    """Key-value storage read or write failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        ctx.debug_info = {"detail": message}
        super().__init__(
            "Internal server error", "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
        self.detail = message
