"""Error Hierarchy — typed, categorized exceptions for every Employee API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the error envelope: {"status": "error", "error": message}
    - http_status is what the HTTP boundary answers with
    - RateLimitedError and EmployeeNotFoundError are UpstreamHTTPError subclasses

Design Decisions:
    - Single hierarchy with EmployeeApiError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from employee_api.schemas.envelope import Envelope


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    RATE_LIMIT = "rate_limit"
    EXTERNAL_API = "external_api"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    employee_id: str | None = None
    attempts: int | None = None
    debug_info: dict[str, Any] | None = None


class EmployeeApiError(Exception):
    """Base exception for all Employee API errors."""

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

    def to_response(self) -> dict:
        """Convert to the error envelope returned over HTTP."""
        return Envelope.failure(self.message).to_body()


# ─── Upstream HTTP errors ───────────────────────────────────────

class UpstreamHTTPError(EmployeeApiError):
    """Upstream answered with a non-2xx status."""
    def __init__(
        self,
        status_code: int,
        message: str,
        code: str = "UPSTREAM_HTTP_ERROR",
        category: ErrorCategory = ErrorCategory.EXTERNAL_API,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, category, severity, context, status_code,
        )
        self.status_code = status_code


class EmployeeNotFoundError(UpstreamHTTPError):
    """Upstream has no employee with the requested identifier."""
    def __init__(self, employee_id: str | None = None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.employee_id = employee_id
        super().__init__(
            404, "Employee not found", "EMPLOYEE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, ctx,
        )
        self.employee_id = employee_id


class RateLimitedError(UpstreamHTTPError):
    """Upstream signalled too many requests (HTTP 429)."""
    def __init__(self, message: str = "Too many requests", context: ErrorContext | None = None):
        super().__init__(
            429, message, "RATE_LIMITED",
            ErrorCategory.RATE_LIMIT, ErrorSeverity.WARNING, context,
        )


# ─── Upstream transport errors ──────────────────────────────────

class UpstreamTimeoutError(EmployeeApiError):
    """Upstream did not answer within the configured timeout."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Upstream timeout: {message}", "UPSTREAM_TIMEOUT",
            ErrorCategory.TIMEOUT, ErrorSeverity.CRITICAL, context, 504,
        )


class UpstreamUnavailableError(EmployeeApiError):
    """Upstream could not be reached."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Upstream unavailable: {message}", "UPSTREAM_UNAVAILABLE",
            ErrorCategory.EXTERNAL_API, ErrorSeverity.CRITICAL, context, 503,
        )


class UpstreamResponseError(EmployeeApiError):
    """Upstream answered 2xx with a body that is not a valid envelope."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid upstream response: {message}", "UPSTREAM_BAD_RESPONSE",
            ErrorCategory.EXTERNAL_API, ErrorSeverity.CRITICAL, context, 502,
        )
