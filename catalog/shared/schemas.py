"""Base Pydantic schemas shared by request and response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """Base schema with the common configuration.

    All schemas should inherit from this class so that the application
    behaves consistently.
    """

    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True,
        str_strip_whitespace=True,
        populate_by_name=True,
    )


class TimestampSchema(BaseSchema):
    """Schema with audit timestamps set by the store."""

    created_at: datetime | None = Field(
        default=None,
        description="Creation time (UTC)",
    )
    updated_at: datetime | None = Field(
        default=None,
        description="Last update time (UTC)",
    )


class HealthResponse(BaseSchema):
    """Health check response."""

    status: str = Field(..., description="Overall service status")
    version: str = Field(..., description="Application version")
    dependencies: dict[str, str] = Field(
        default_factory=dict,
        description="Status of each internal dependency",
    )
