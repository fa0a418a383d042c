"""Error Hierarchy — typed, categorized exceptions for all showcase failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are raised before any mutation reaches a store
    - Storage errors (500-level) are wrapped by the gateway into operation-scoped errors
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with ShowcaseError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
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
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and API envelopes."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    use_case_id: str | None = None
    operation: str | None = None
    backend: str | None = None
    debug_info: dict[str, Any] | None = None


class ShowcaseError(Exception):
    """Base exception for all showcase errors."""

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
                    "use_case_id": self.context.use_case_id,
                    "operation": self.context.operation,
                    "backend": self.context.backend,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class UseCaseValidationError(ShowcaseError):
    """Required field missing, blank, or empty after normalization."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ResourceNotFoundError(ShowcaseError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.use_case_id = ctx.use_case_id or resource_id
        super().__init__(
            f"{resource_type} with ID {resource_id} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(ShowcaseError):
    """A storage backend reported a failure."""
    def __init__(
        self, message: str, operation: str, backend: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or operation
        ctx.backend = ctx.backend or backend
        super().__init__(
            f"Storage {operation} failed ({backend}): {message}",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation
        self.backend = backend


class UseCaseBackendError(ShowcaseError):
    """Gateway operation failed because its backend failed."""
    def __init__(
        self, message: str, operation: str, use_case_id: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        ctx.use_case_id = use_case_id
        super().__init__(
            message, "USE_CASE_BACKEND_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation
        self.use_case_id = use_case_id
