"""Translation of failures into structured API error responses.

``translate`` is total: any exception yields exactly one
``(status_code, ErrorResponse)`` pair.
"""

from http import HTTPStatus
from typing import Any

from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.shared.context import trace_id_var

from .base import AppError
from .domain import ValidationError
from .mapping import ExceptionMapper
from .schemas import ErrorResponse, FieldViolation

_LOCATION_PREFIXES = frozenset({"body", "query", "path", "header", "cookie"})


def _field_name(loc: tuple[Any, ...] | list[Any]) -> str:
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(str(part) for part in parts) or "request"


def violations_from(exc: RequestValidationError) -> list[FieldViolation]:
    """Flatten FastAPI validation errors into (field, message) pairs."""
    return [
        FieldViolation(field=_field_name(error.get("loc", ())), message=error.get("msg", ""))
        for error in exc.errors()
    ]


def to_domain_error(exc: Exception, path: str = "") -> AppError:
    """Normalize any exception to a member of the AppError family."""
    if isinstance(exc, AppError):
        return exc
    if isinstance(exc, RequestValidationError):
        return ValidationError(violations_from(exc))
    return ExceptionMapper.map(exc, path)


def translate(exc: Exception, path: str = "") -> tuple[int, ErrorResponse]:
    """Translate an exception raised while serving ``path``.

    Args:
        exc: Any exception that reached the HTTP layer
        path: Request path, echoed back in the response

    Returns:
        HTTP status code and the response body model
    """
    if isinstance(exc, StarletteHTTPException):
        try:
            title = HTTPStatus(exc.status_code).phrase
        except ValueError:
            title = "HTTP Error"
        response = ErrorResponse(
            status=exc.status_code,
            error=title,
            code=f"HTTP_{exc.status_code}",
            message=str(exc.detail),
            path=path,
            trace_id=trace_id_var.get(),
        )
        return exc.status_code, response

    error = to_domain_error(exc, path)
    return error.status_code, error.to_response(path)
