"""Shared errors package.

Failure taxonomy and its translation into API error responses.
"""

from .base import AppError, ErrorKind
from .domain import (
    AlreadyExistsError,
    BadRequestError,
    InvalidDataError,
    NotFoundError,
    TransientAccessError,
    ValidationError,
)
from .mapping import ExceptionMapper
from .schemas import ErrorResponse, FieldViolation
from .translator import to_domain_error, translate

__all__ = [
    # Base
    "AppError",
    "ErrorKind",
    # Domain errors
    "NotFoundError",
    "AlreadyExistsError",
    "InvalidDataError",
    "TransientAccessError",
    "ValidationError",
    "BadRequestError",
    # Mapping
    "ExceptionMapper",
    "to_domain_error",
    "translate",
    # Schemas
    "ErrorResponse",
    "FieldViolation",
]
