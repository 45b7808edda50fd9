"""Base exception class for application errors.

Core exception logic with auto-generation of error codes and messages.
Every concrete error is tagged with an :class:`ErrorKind`; the kinds and the
error classes correspond one to one.
"""

import re
from enum import StrEnum
from typing import Any

from catalog.shared.context import trace_id_var

from .schemas import ErrorResponse, FieldViolation


class ErrorKind(StrEnum):
    """Closed set of failure kinds the application can produce."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_DATA = "invalid_data"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    BAD_REQUEST = "bad_request"
    INTERNAL = "internal"


class AppError(Exception):
    """Base class for all application errors.

    Features:
    - Auto-generates code from class name (e.g., NotFoundError -> NOT_FOUND)
    - Auto-generates default_message from docstring
    - Hides the raw message from clients when expose_message is False
    - Includes trace_id from context for request correlation
    """

    kind: ErrorKind = ErrorKind.INTERNAL
    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    title: str = "Internal Server Error"
    default_message: str = "An unexpected error occurred. Please try again later."
    expose_message: bool = False

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Auto-generate code and default_message for subclasses."""
        super().__init_subclass__(**kwargs)

        if "code" not in cls.__dict__:
            name = cls.__name__
            for suffix in ("Exception", "Error"):
                if name.endswith(suffix):
                    name = name[: -len(suffix)]
                    break
            cls.code = re.sub(r"(?<!^)(?=[A-Z])", "_", name).upper()

        if "default_message" not in cls.__dict__ and cls.__doc__:
            cls.default_message = cls.__doc__.strip().split("\n")[0]

    @property
    def trace_id(self) -> str:
        """Get current trace_id from context."""
        return trace_id_var.get()

    @property
    def public_message(self) -> str:
        """Message that is safe to show to the caller."""
        return self.message if self.expose_message else self.default_message

    def violations(self) -> list[FieldViolation] | None:
        """Field-level failures attached to the response, if any."""
        return None

    def to_response(self, path: str = "") -> ErrorResponse:
        """Serialize to the unified error response model."""
        return ErrorResponse(
            status=self.status_code,
            error=self.title,
            code=self.code,
            message=self.public_message,
            path=path,
            trace_id=self.trace_id,
            details=self.details or None,
            validation_errors=self.violations(),
        )

    @classmethod
    def openapi_response(cls) -> dict[str, Any]:
        """Generate OpenAPI schema for this exception type."""
        return {
            "model": ErrorResponse,
            "description": cls.title,
            "content": {
                "application/json": {
                    "example": {
                        "status": cls.status_code,
                        "error": cls.title,
                        "code": cls.code,
                        "message": cls.default_message,
                        "path": "/api/items",
                        "trace_id": "example-trace-id",
                        "details": {},
                    }
                }
            },
        }
