"""Error Hierarchy — typed, categorized exceptions for all inventory failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) carry a client-safe message; store errors (500-level)
      never expose their internal message to the client
    - to_envelope() produces the Err variant of the response envelope

Design Decisions:
    - Single hierarchy with InventoryError base: one global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone

from warehouse.core.envelope import Err

INTERNAL_ERROR_MESSAGE = "Internal server error"


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    item_id: int | None = None
    operation: str | None = None


class InventoryError(Exception):
    """Base exception for all inventory errors."""

    # 500-level errors answer with INTERNAL_ERROR_MESSAGE instead of self.message
    exposes_message = True

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

    def to_envelope(self) -> Err:
        """Convert to the failure variant of the response envelope."""
        if not self.exposes_message:
            return Err(error=INTERNAL_ERROR_MESSAGE)
        return Err(error=self.message)

    def to_response(self) -> dict:
        """Convert to standardized REST error body."""
        return self.to_envelope().to_response()


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationFailed(InventoryError):
    """Candidate record rejected by the validator."""
    def __init__(self, errors: dict[str, str], context: ErrorContext | None = None):
        super().__init__(
            "Validation failed", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.errors = dict(errors)

    def to_envelope(self) -> Err:
        return Err(error=self.message, validation_errors=self.errors)


class InvalidIdentifier(InventoryError):
    """Path identity is not an integer."""
    def __init__(self, raw_id: str, context: ErrorContext | None = None):
        super().__init__(
            "Invalid item ID", "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.raw_id = raw_id


class NotFound(InventoryError):
    """Requested record does not exist."""
    def __init__(self, item_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.item_id = item_id
        super().__init__(
            "Item not found", "RESOURCE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.ERROR, ctx, 404,
        )
        self.item_id = item_id


# ─── Store Errors (500-level) ───────────────────────────────────

class ConstraintViolation(InventoryError):
    """Store rejected a row the validator accepted (CHECK constraint)."""
    exposes_message = False

    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Constraint violated on {operation}: {message}",
            "CONSTRAINT_VIOLATION", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation


class DatabaseError(InventoryError):
    """Database operation failed."""
    exposes_message = False

    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
