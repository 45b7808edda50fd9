"""Exception handlers for FastAPI.

Every failure that escapes a route goes through ``translate`` so that the
application has exactly one response shape per failure kind.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.core.metrics import ERRORS_TOTAL
from catalog.shared.logging import get_logger

from .base import AppError
from .translator import translate

logger = get_logger(__name__)


async def error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Translate any exception into a JSON error response.

    Client errors are logged at WARNING, server errors with the traceback.
    Headers carried by HTTP exceptions (``Allow`` on 405) are kept.

    Args:
        request: HTTP request
        exc: Exception raised while serving it

    Returns:
        JSONResponse with the unified error body
    """
    path = request.url.path
    status_code, response = translate(exc, path)

    # Unhandled exceptions arrive after the tracing middleware reset the context
    request_id = getattr(request.state, "request_id", "")
    if not response.trace_id:
        response.trace_id = request_id

    if status_code >= 500:
        logger.opt(exception=exc).error(
            "Request failed",
            method=request.method,
            path=path,
            code=response.code,
            cause=str(exc),
        )
    else:
        logger.warning(
            "Request rejected",
            method=request.method,
            path=path,
            code=response.code,
            cause=str(exc),
        )

    ERRORS_TOTAL.labels(code=response.code).inc()

    headers = dict(getattr(exc, "headers", None) or {})
    headers["X-Error-Code"] = response.code
    if request_id:
        headers["X-Request-ID"] = request_id

    return JSONResponse(
        status_code=status_code,
        content=response.model_dump(mode="json", exclude_none=True),
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers in FastAPI application.

    Registers handlers for:
    - Business errors (AppError)
    - Validation errors (RequestValidationError)
    - HTTP errors (StarletteHTTPException)
    - Unexpected exceptions (Exception)

    Args:
        app: FastAPI application instance
    """
    for exc_type in (AppError, RequestValidationError, StarletteHTTPException, Exception):
        app.add_exception_handler(exc_type, error_handler)

