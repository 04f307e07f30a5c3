"""Domain exceptions raised by repositories and the procedure router."""

from __future__ import annotations

from typing import Any, Dict, List


class SiteCMSError(Exception):
    """Base exception for site CMS service errors."""

    def __init__(self, message: str, error_code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ValidationError(SiteCMSError):
    """Raised when procedure input fails the boundary schema."""

    def __init__(self, issues: List[Dict[str, Any]], message: str | None = None) -> None:
        if message is None:
            fields = ", ".join(issue["field"] or "<input>" for issue in issues)
            message = f"Invalid input: {fields}" if fields else "Invalid input"
        super().__init__(message, "BAD_REQUEST")
        self.issues = issues


class NotFound(SiteCMSError):
    """Raised when a mutation targets an id that does not exist."""

    def __init__(self, entity: str, entity_id: Any) -> None:
        super().__init__(f"{entity} with id {entity_id} not found", "NOT_FOUND")
        self.entity = entity
        self.entity_id = entity_id


class ConstraintViolation(SiteCMSError):
    """Raised when storage rejects a write, e.g. a duplicate slug."""

    def __init__(self, entity: str, detail: str, kind: str | None = None) -> None:
        constraint = f"{kind} constraint" if kind else "constraint"
        super().__init__(f"{entity} violates a {constraint}: {detail}", "CONFLICT")
        self.entity = entity
        self.detail = detail
        self.kind = kind


class StorageUnavailable(SiteCMSError):
    """Raised when the database cannot be reached or fails unexpectedly."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Storage failure during {operation}", "STORAGE_UNAVAILABLE")
        self.operation = operation
