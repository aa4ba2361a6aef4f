"""Domain error types.

Purpose:
- Give services a small vocabulary of failures that do not depend on HTTP.
- Let the server translate each failure to a status code in one place
  (see ``unthink.server.exception_handlers``).

Usage:
- Raise ``NotFoundError`` / ``PermissionDeniedError`` / ``ConflictError`` from
  services when a lookup or ownership check fails.
- Catch ``ExternalServiceError`` and inspect ``status_code`` or ``details``
  when a hosted collaborator (storage, functions) rejects a call.
"""

from __future__ import annotations

from typing import Any, Optional


class UnthinkError(Exception):
    """Base error for domain failures.

    Args:
        message: Human-readable error description.
    """

    http_status: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(UnthinkError):
    """Raised when a row does not exist or is not visible to the caller."""

    http_status = 404

    def __init__(self, resource: str, identifier: Any) -> None:
        super().__init__(f"{resource} not found: {identifier}")
        self.resource = resource
        self.identifier = identifier


class PermissionDeniedError(UnthinkError):
    """Raised when a user tries to change a row owned by someone else."""

    http_status = 403


class ConflictError(UnthinkError):
    """Raised when the requested row already exists (follow, reading list)."""

    http_status = 409


class ContentValidationError(UnthinkError):
    """Raised for business rules that cannot be checked by request schemas alone."""

    http_status = 422


class PayloadTooLargeError(UnthinkError):
    """Raised when an uploaded file exceeds the bucket's size limit."""

    http_status = 413


class UnsupportedMediaTypeError(UnthinkError):
    """Raised when an uploaded file has a content type the bucket does not accept."""

    http_status = 415


class ExternalServiceError(UnthinkError):
    """Base error for failures of hosted collaborators.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code returned by the collaborator.
        details: Optional structured payload from the collaborator (e.g., JSON body).
    """

    http_status = 502

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details
