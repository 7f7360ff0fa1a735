"""Error Taxonomy — tagged, categorized exceptions for every catalog failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - HTTP status is derived from the category via STATUS_BY_CATEGORY, never
      from the exception class
    - to_response() always carries status_code, message, category and a UTC timestamp
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CatalogError base: one FastAPI handler catches all
    - Closed category -> status table: adding a category forces a status decision here
    - ErrorContext as dataclass: rich observability without coupling to logging
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
    """Closed set of error tags. Each maps to exactly one HTTP status."""
    VALIDATION = "validation"
    INVALID_OPERATION = "invalid_operation"
    UNAUTHORIZED = "unauthorized"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    EXTERNAL_SERVICE = "external_service"
    INTERNAL = "internal"


STATUS_BY_CATEGORY: dict[ErrorCategory, int] = {
    ErrorCategory.VALIDATION: 400,
    ErrorCategory.INVALID_OPERATION: 400,
    ErrorCategory.UNAUTHORIZED: 401,
    ErrorCategory.RESOURCE_NOT_FOUND: 404,
    ErrorCategory.CONFLICT: 400,
    ErrorCategory.EXTERNAL_SERVICE: 502,
    ErrorCategory.INTERNAL: 500,
}


@dataclass
class ErrorContext:
    """Context attached to an error for logs and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    @property
    def http_status(self) -> int:
        return STATUS_BY_CATEGORY[self.category]

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "status_code": self.http_status,
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(CatalogError):
    """Malformed or missing input."""
    def __init__(
        self, message: str, field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.field = field


class DiscountOutOfRangeError(ValidationError):
    """Discount percentage outside [0, 100]."""
    def __init__(self, percentage: object, context: ErrorContext | None = None):
        super().__init__(
            f"Discount percentage must be between 0 and 100 (got {percentage})",
            "discount_percentage", context,
        )
        self.code = "DISCOUNT_OUT_OF_RANGE"
        self.percentage = percentage


class InvalidOperationError(CatalogError):
    """Operation not valid for the current state of the request."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_OPERATION", ErrorCategory.INVALID_OPERATION,
            ErrorSeverity.ERROR, context,
        )


class UnauthorizedError(CatalogError):
    """Caller is not allowed to perform the operation."""
    def __init__(
        self, message: str = "Access denied", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.UNAUTHORIZED,
            ErrorSeverity.WARNING, context,
        )


class ResourceNotFoundError(CatalogError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str,
        context: ErrorContext | None = None, message: str | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            message or f"{resource_type} with ID {resource_id} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx,
        )


class ConflictError(CatalogError):
    """Write would violate a uniqueness rule. Never retried."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context,
        )


# ─── Server Errors (500-level) ──────────────────────────────────

class NotificationError(CatalogError):
    """Outbound notification could not be delivered."""
    def __init__(self, message: str, recipient: str, context: ErrorContext | None = None):
        super().__init__(
            f"Notification to {recipient} failed: {message}",
            "NOTIFICATION_FAILED", ErrorCategory.EXTERNAL_SERVICE,
            ErrorSeverity.WARNING, context,
        )
        self.recipient = recipient


class InternalError(CatalogError):
    """Unexpected failure. Message shown to clients stays generic."""
    def __init__(self, detail: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"operation": operation, "detail": detail}
        super().__init__(
            "An internal server error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.operation = operation
        self.detail = detail
