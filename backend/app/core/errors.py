"""Error Hierarchy — typed, categorized exceptions for every failure the API reports.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404) are raised before or instead of any store mutation
    - Store errors (500) carry a diagnostic in `details`, never a traceback
    - to_response() produces the REST envelope {"error", "code", "category", "details"?}

Design Decisions:
    - Single hierarchy with IndiaError base: one global handler renders all of them
    - `error` holds the human-readable message so clients can show it as-is
"""

from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Stable, machine-readable error categories."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class IndiaError(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to the standard REST error envelope."""
        body: dict[str, Any] = {
            "error": self.message,
            "code": self.code,
            "category": self.category.value,
        }
        if self.details is not None:
            body["details"] = self.details
        return body


# ─── Client Errors (400-level) ──────────────────────────────────

class MissingIdentityError(IndiaError):
    """Caller identity header absent or blank."""
    def __init__(self, header: str):
        super().__init__(
            f"User ID não informado (missing '{header}' header)",
            "MISSING_IDENTITY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.header = header


class MissingRequiredFieldError(IndiaError):
    """Create payload lacks one or more mandatory fields."""
    def __init__(self, resource: str, fields: list[str]):
        super().__init__(
            f"Missing required field(s) for {resource}: {', '.join(fields)}",
            "MISSING_REQUIRED_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400, details={"fields": fields},
        )
        self.resource = resource
        self.fields = fields


class InvalidFieldError(IndiaError):
    """A supplied value cannot be stored as given."""
    def __init__(self, field: str, reason: str):
        super().__init__(
            f"Invalid value for '{field}': {reason}",
            "INVALID_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400, details={"field": field},
        )
        self.field = field


class ResourceNotFoundError(IndiaError):
    """Record absent, or owned by someone else (indistinguishable)."""
    def __init__(self, resource: str, record_id: str):
        super().__init__(
            f"{resource} '{record_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource = resource
        self.record_id = record_id


# ─── Store Errors (500-level) ───────────────────────────────────

class DatabaseError(IndiaError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500, details=message,
        )
        self.operation = operation
