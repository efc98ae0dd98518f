"""Error Hierarchy - typed, categorized exceptions for all blog API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are 400-level; infrastructure errors are 500-level
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BlogApiError base: one global handler catches all
    - ErrorContext as dataclass: carries observability fields without coupling to logging
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    post_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class BlogApiError(Exception):
    """Base exception for all blog API errors."""

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
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "post_id": self.context.post_id,
                    "operation": self.context.operation,
                },
            }
        }


# --- Domain Errors (400-level) ------------------------------------------------

class ResourceNotFoundError(BlogApiError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.post_id = ctx.post_id or resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class IdMismatchError(BlogApiError):
    """Body id and path id disagree on an update."""
    def __init__(self, path_id: str, body_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.post_id = ctx.post_id or path_id
        super().__init__(
            f"Request path id ({path_id}) and request body id ({body_id}) must match",
            "ID_MISMATCH", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.path_id = path_id
        self.body_id = body_id


# --- Infrastructure Errors (500-level) ----------------------------------------

class DatabaseError(BlogApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation
