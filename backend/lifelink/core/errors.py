"""Error Hierarchy: typed exceptions for every failure the gateway reports.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status
    - to_response() produces the uniform envelope: success is always False
    - Only StorageError carries raw backend text (in the envelope's `error` key)

Design Decisions:
    - Single hierarchy with LifelinkError base: FastAPI global handler catches all
    - Conflicts map to 400, not 409: clients treat duplicates as bad input
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for routing and logging."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORAGE = "storage"


class LifelinkError(Exception):
    """Base exception for all gateway errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
        detail: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status
        self.detail = detail

    def to_response(self) -> dict:
        """Convert to the failure envelope."""
        body = {"success": False, "message": self.message}
        if self.detail is not None:
            body["error"] = self.detail
        return body


# ─── Client Errors (400-level) ──────────────────────────────────

class FieldValidationError(LifelinkError):
    """Required input missing or malformed."""
    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION, 400,
        )
        self.fields = fields or []


class ConflictError(LifelinkError):
    """Storage rejected a write because of a uniqueness constraint."""
    def __init__(self, message: str):
        super().__init__(message, "CONFLICT", ErrorCategory.CONFLICT, 400)


class ResourceNotFoundError(LifelinkError):
    """No row matches the requested id."""
    def __init__(self, resource_type: str, resource_id: object):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(LifelinkError):
    """Any backend failure that is not a classified conflict."""
    def __init__(self, message: str, backend_message: str):
        super().__init__(
            message, "STORAGE_ERROR", ErrorCategory.STORAGE, 500,
            detail=backend_message,
        )
