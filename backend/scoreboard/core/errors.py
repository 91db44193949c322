"""Error Hierarchy — typed, categorized exceptions for all Scoreboard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Not-found errors are 404; every store failure is 500
    - to_response() produces the single REST error envelope used by all handlers
    - StoreError carries the driver message verbatim

Design Decisions:
    - Single hierarchy with ScoreboardError base: one FastAPI handler renders all
    - Store failures share status 500; the code names the cause
      (INTEGRITY_ERROR, STORE_UNAVAILABLE, STORE_ERROR)
"""

from dataclasses import dataclass, field
from enum import Enum
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
    """Where the error happened — which entity, which row, which statement."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: int | None = None
    operation: str | None = None


class ScoreboardError(Exception):
    """Base exception for all Scoreboard errors."""

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
                    "entity": self.context.entity,
                    "entity_id": self.context.entity_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(ScoreboardError):
    """No row with the requested identifier."""
    def __init__(
        self, resource_type: str, resource_id: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = resource_type
        ctx.entity_id = resource_id
        super().__init__(
            f"{resource_type} with ID {resource_id} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Store Errors (500-level) ───────────────────────────────────

class StoreError(ScoreboardError):
    """Statement failed in the relational store. Message is the driver's, unedited."""
    def __init__(
        self,
        message: str,
        operation: str,
        code: str = "STORE_ERROR",
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            message, code, ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation


class IntegrityViolationError(StoreError):
    """Constraint violation, e.g. a score naming a player that does not exist."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(message, operation, "INTEGRITY_ERROR", context)


class StoreUnavailableError(StoreError):
    """Connectivity or operational failure."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(message, operation, "STORE_UNAVAILABLE", context)
