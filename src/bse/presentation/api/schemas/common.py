"""Common schemas shared across API endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema that reads and writes camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ErrorResponse(CamelModel):
    """Standard error response schema."""

    message: str = Field(..., description="Error message")
    status_code: int = Field(..., description="HTTP status code")
    errors: dict[str, list[str]] | None = Field(
        None,
        description="Per-field validation messages",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"message": "Blog with ID 7 not found", "statusCode": 404},
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
