"""Error Hierarchy — typed, categorized exceptions for every request failure.

Invariants:
    - Every error carries details (list[str]), code, category, severity and http_status
    - Not-found is surfaced as 400, never 404 (existence is not leaked)
    - to_response() produces the uniform envelope: title, timestamp, status, exception, details
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CreditSystemError base: one global handler catches all (ADR: uniform error shape)
    - NotFoundFailure subclasses BusinessRuleFailure: an unknown id is a rule violation for callers
    - ErrorContext as dataclass: timestamp captured at raise time, not at render time
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    MALFORMED_IDENTIFIER = "malformed_identifier"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


STATUS_TITLES: dict[int, str] = {
    400: "Bad Request! Consult the documentation",
    409: "Conflict! Consult the documentation",
    500: "Internal Server Error! Consult the documentation",
    503: "Service Unavailable! Consult the documentation",
}


def title_for_status(http_status: int) -> str:
    """Fixed envelope title for an HTTP status."""
    return STATUS_TITLES.get(http_status, STATUS_TITLES[500])


@dataclass
class ErrorContext:
    """Context captured when the error is raised."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    customer_id: int | None = None
    credit_code: str | None = None


def build_error_envelope(
    http_status: int,
    exception_name: str,
    details: list[str],
    timestamp: datetime | None = None,
) -> dict:
    """Uniform error body shared by domain errors and the catch-all handler."""
    return {
        "title": title_for_status(http_status),
        "timestamp": (timestamp or datetime.now(timezone.utc)).isoformat(),
        "status": http_status,
        "exception": exception_name,
        "details": list(details),
    }


class CreditSystemError(Exception):
    """Base exception for all credit system errors."""

    def __init__(
        self,
        details: list[str],
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__("; ".join(details))
        self.details = list(details)
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def message(self) -> str:
        return "; ".join(self.details)

    def to_response(self) -> dict:
        """Convert to the standardized REST error envelope."""
        return build_error_envelope(
            self.http_status,
            type(self).__name__,
            self.details,
            self.context.timestamp,
        )


# ─── Request Errors (400-level) ─────────────────────────────────

class ValidationFailure(CreditSystemError):
    """One or more field-level constraint violations."""
    def __init__(self, details: list[str], context: ErrorContext | None = None):
        super().__init__(
            details, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class BusinessRuleFailure(CreditSystemError):
    """Request is well-formed but violates a domain rule."""
    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        code: str = "BUSINESS_RULE_VIOLATION",
        category: ErrorCategory = ErrorCategory.BUSINESS_RULE,
    ):
        super().__init__(
            [message], code, category, ErrorSeverity.WARNING, context, 400,
        )


class NotFoundFailure(BusinessRuleFailure):
    """Referenced entity does not exist. Surfaced as 400."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, context,
            code="RESOURCE_NOT_FOUND",
            category=ErrorCategory.RESOURCE_NOT_FOUND,
        )


class MalformedIdentifierFailure(CreditSystemError):
    """Identifier in the request could not be parsed."""
    def __init__(self, raw_value: str, context: ErrorContext | None = None):
        super().__init__(
            [f"Invalid UUID string: {raw_value}"], "MALFORMED_IDENTIFIER",
            ErrorCategory.MALFORMED_IDENTIFIER, ErrorSeverity.WARNING,
            context, 400,
        )
        self.raw_value = raw_value


class ConflictFailure(CreditSystemError):
    """Uniqueness constraint violated at the store level."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            [message], "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CreditSystemError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            [f"Database {operation} failed: {message}"], "DATABASE_ERROR",
            ErrorCategory.DATABASE, ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
