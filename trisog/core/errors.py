"""Error Hierarchy — typed, categorized exceptions for all Trisog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) carry the exact user-facing message
    - Infrastructure errors (500-level) never leak internal details
    - to_response() always produces the {"msg": str} envelope

Design Decisions:
    - Single hierarchy with TrisogError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields travel with the error, not the message
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    resource_id: str | None = None
    user_id: str | None = None
    debug_info: dict[str, Any] | None = None


class TrisogError(Exception):
    """Base exception for all Trisog errors."""

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
        """Convert to the REST error envelope."""
        return {"msg": self.message}

    def log_extra(self) -> dict:
        """Structured fields for the JSON log formatter."""
        return {
            "error_code": self.code,
            "resource": self.context.resource,
            "resource_id": self.context.resource_id,
            "user_id": self.context.user_id,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class PayloadValidationError(TrisogError):
    """Request body failed schema validation."""
    def __init__(self, message: str, field: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class InvalidIdentifierError(TrisogError):
    """Path or payload identifier is not well-formed."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidQueryError(TrisogError):
    """Listing query options could not be parsed."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_QUERY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class ReferenceNotFoundError(TrisogError):
    """A payload references an entity that does not exist."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "REFERENCE_NOT_FOUND", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class BusinessRuleError(TrisogError):
    """Request is well-formed but violates a business rule."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "BUSINESS_RULE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class AuthenticationError(TrisogError):
    """Bearer token missing or rejected."""
    def __init__(self, message: str = "Unauthorized", context: ErrorContext | None = None):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ForbiddenError(TrisogError):
    """Authenticated user may not touch this resource."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class ResourceNotFoundError(TrisogError):
    """Requested resource does not exist."""
    def __init__(self, message: str = "No data found", context: ErrorContext | None = None):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TrisogError):
    """Database operation failed."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            "Internal server error",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
