"""Error Hierarchy — typed, categorized exceptions for every exercise tracker failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() always carries a top-level "message" field
    - Only two operational kinds reach clients: NotFound (404) and Internal (500)
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ExerciseTrackerError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - Store failures carry the per-operation message ("User creation failed!") rather than
      the driver error; the cause stays in the logs
"""

from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    TRANSPORT = "transport"
    INTERNAL = "internal"


class ExerciseTrackerError(Exception):
    """Base exception for all exercise tracker errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.timestamp = datetime.now(timezone.utc)

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "message": self.message,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.timestamp.isoformat(),
            },
        }


class NotFoundError(ExerciseTrackerError):
    """Referenced record is absent (or, for listings, the collection is empty)."""
    def __init__(self, message: str):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )


class InternalError(ExerciseTrackerError):
    """Store operation failed; cause is not distinguished for the caller."""
    def __init__(self, message: str, operation: str = "unknown"):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation


class MalformedBodyError(ExerciseTrackerError):
    """Request body declared as JSON could not be decoded."""
    def __init__(self, message: str = "Malformed request body"):
        super().__init__(
            message, "MALFORMED_BODY", ErrorCategory.TRANSPORT,
            ErrorSeverity.WARNING, 400,
        )
