"""Error Hierarchy — typed, categorized exceptions for every link-store failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; store errors (500-level) are critical
    - to_response() produces the {success: false, error, details?} envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with LinkServiceError base: one mapping from error kind to HTTP status
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    record_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class LinkServiceError(Exception):
    """Base exception for all link service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: list[str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to the failure envelope returned to clients."""
        body: dict[str, Any] = {"success": False, "error": self.message}
        if self.details:
            body["details"] = list(self.details)
        return body


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(LinkServiceError):
    """One or more field rules violated. details holds one message per rule."""
    def __init__(
        self,
        details: list[str],
        message: str = "Validation error",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400, details,
        )


class MissingFieldsError(ValidationError):
    """telegram_link or owner_name absent from the request body."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            [], "Both telegram_link and owner_name are required", context,
        )
        self.code = "MISSING_FIELDS"


class DuplicateLinkError(LinkServiceError):
    """Another record already stores the same telegram_link."""
    def __init__(self, telegram_link: str, context: ErrorContext | None = None):
        super().__init__(
            "Telegram link already exists",
            "DUPLICATE_LINK", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
        self.telegram_link = telegram_link


class LinkNotFoundError(LinkServiceError):
    """No record exists for the requested id."""
    def __init__(self, record_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.record_id = record_id
        super().__init__(
            "Telegram link not found",
            "LINK_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )
        self.record_id = record_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(LinkServiceError):
    """Persistence operation failed. message is the client-facing summary."""
    def __init__(
        self,
        operation: str,
        message: str = "Database operation failed",
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            message, "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
