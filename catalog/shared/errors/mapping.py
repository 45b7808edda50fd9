"""Mapping of technical errors to domain errors.

Exceptions that do not belong to the application taxonomy (stdlib argument
errors, timeouts) are converted here before translation to a response.
"""

import logging
from collections.abc import Callable
from decimal import InvalidOperation
from typing import Any

from .base import AppError
from .domain import BadRequestError, TransientAccessError

logger = logging.getLogger(__name__)


class ExceptionMapper:
    """Centralized mapping of technical exceptions to domain exceptions."""

    _handlers: dict[type[Exception], Callable[[Exception, str], AppError]] = {}

    @classmethod
    def register(
        cls, *exception_types: type[Exception]
    ) -> Callable[[Callable[[Any, str], AppError]], Callable[[Any, str], AppError]]:
        """Register a handler for exception types.

        Usage:
            @ExceptionMapper.register(TimeoutError)
            def _handle_timeout(exc: TimeoutError, origin: str) -> AppError:
                return TransientAccessError(str(exc))
        """

        def decorator(
            handler: Callable[[Any, str], AppError]
        ) -> Callable[[Any, str], AppError]:
            for exc_type in exception_types:
                cls._handlers[exc_type] = handler
            return handler

        return decorator

    @classmethod
    def map(cls, exc: Exception, origin: str = "") -> AppError:
        """Map a technical exception to a domain exception.

        Args:
            exc: The technical exception to map
            origin: Where the exception surfaced (request path or function name)

        Returns:
            Mapped domain exception; a generic AppError when nothing matches
        """
        if isinstance(exc, AppError):
            return exc

        handler = cls._handlers.get(type(exc))

        if handler is None:
            for exc_type, exc_handler in cls._handlers.items():
                if isinstance(exc, exc_type):
                    handler = exc_handler
                    break

        if handler:
            return handler(exc, origin)

        logger.error(
            f"Unhandled exception in {origin or 'unknown'}: {type(exc).__name__}",
            exc_info=exc,
        )
        return AppError(details={"origin": origin} if origin else {})


# --- Register default handlers ---


@ExceptionMapper.register(ValueError, InvalidOperation)
def _handle_invalid_argument(exc: Exception, origin: str) -> AppError:
    """Argument rejected by a stdlib or library call."""
    return BadRequestError(message=str(exc) or BadRequestError.default_message)


@ExceptionMapper.register(TimeoutError, ConnectionError)
def _handle_backend_unavailable(exc: Exception, origin: str) -> AppError:
    """Backend did not answer in time."""
    logger.warning(f"Backend unavailable in {origin}: {exc}")
    return TransientAccessError(message=str(exc))
