"""Pydantic models for error handling.

Data structures for error responses and field-level violations.
"""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field


class FieldViolation(BaseModel):
    """A single field-level request validation failure."""

    field: str = Field(..., description="Dotted path of the offending field")
    message: str = Field(..., description="Why the value was rejected")


class ErrorResponse(BaseModel):
    """Unified error response schema."""

    status: int = Field(..., description="HTTP status code")
    error: str = Field(..., description="Short title of the failure")
    code: str = Field(..., description="Error code (SNAKE_CASE)")
    message: str = Field(..., description="Human-readable error description")
    path: str = Field(default="", description="Request path that failed")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    trace_id: str = Field(default="", description="Request correlation ID")
    details: dict[str, Any] | None = Field(
        default=None,
        description="Additional error context, omitted when empty",
    )
    validation_errors: list[FieldViolation] | None = Field(
        default=None,
        description="Field-level failures, present only for validation errors",
    )
