"""
Domain errors raised by services and rendered by the API layer.

Each error carries only the entity kind and a short message; identifiers and
internal detail stay in the server log.
"""

from typing import Any


class DomainError(Exception):
    status_code = 500
    default_code = "INTERNAL"

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class NotFound(DomainError):
    """Referenced entity is missing or inactive."""

    status_code = 404
    default_code = "NOT_FOUND"

    def __init__(self, entity: str, message: str | None = None):
        super().__init__(message or f"{entity} not found")
        self.entity = entity


class InvalidArgument(DomainError):
    """Malformed request or a reference the caller may not use."""

    status_code = 400
    default_code = "INVALID_ARGUMENT"


class Conflict(DomainError):
    """Uniqueness or state conflict."""

    status_code = 409
    default_code = "CONFLICT"
