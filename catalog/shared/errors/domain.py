"""Catalog of domain error types.

The store raises the first four; request parsing produces the last two.
"""

from typing import Any

from .base import AppError, ErrorKind
from .schemas import FieldViolation


class NotFoundError(AppError):
    """Referenced item does not exist."""

    kind = ErrorKind.NOT_FOUND
    status_code = 404
    title = "Item Not Found"
    expose_message = True


class AlreadyExistsError(AppError):
    """An item with the same name already exists."""

    kind = ErrorKind.ALREADY_EXISTS
    status_code = 409
    title = "Item Already Exists"
    expose_message = True


class InvalidDataError(AppError):
    """Item data is invalid."""

    kind = ErrorKind.INVALID_DATA
    status_code = 400
    title = "Invalid Item Data"
    expose_message = True


class TransientAccessError(AppError):
    """Simulated backend failure; the same call may succeed when retried.

    The underlying message stays in logs and is never sent to the caller.
    """

    kind = ErrorKind.TRANSIENT
    status_code = 500
    title = "Database Access Error"
    default_message = "An error occurred while accessing the database. Please try again later."


class ValidationError(AppError):
    """Request validation failed"""

    kind = ErrorKind.VALIDATION
    status_code = 400
    title = "Validation Failed"
    expose_message = True

    def __init__(
        self,
        violations: list[FieldViolation] | None = None,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.field_violations = list(violations or [])
        super().__init__(message=message, details=details)

    def violations(self) -> list[FieldViolation] | None:
        return self.field_violations


class BadRequestError(AppError):
    """Bad request - malformed or invalid argument."""

    kind = ErrorKind.BAD_REQUEST
    status_code = 400
    title = "Invalid Argument"
    expose_message = True
