"""Error Hierarchy: typed, categorized exceptions for every inventory failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status
    - Not-found is its own type: callers branch on the class, never on a code string
    - to_response() produces the REST envelope {"error": {code, message, details?}}
    - Infrastructure messages are generic; driver errors are logged, not returned
"""

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


class InventoryError(Exception):
    """Base exception for all inventory errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
        details: dict[str, list[str]] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict[str, Any]:
        """Convert to standardized REST error response."""
        body: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return {"error": body}


# ─── Domain Errors (400-level) ──────────────────────────────────

class InputValidationError(InventoryError):
    """Client-supplied data failed a field or referential check."""
    def __init__(
        self, message: str, details: dict[str, list[str]] | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION, 400, details,
        )

    @classmethod
    def for_field(cls, field: str, message: str) -> "InputValidationError":
        return cls("Validation failed", {field: [message]})


class ResourceNotFoundError(InventoryError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(InventoryError):
    """Database operation failed."""
    def __init__(self, operation: str):
        super().__init__(
            "A storage error occurred", "DATABASE_ERROR",
            ErrorCategory.DATABASE, 500,
        )
        self.operation = operation
