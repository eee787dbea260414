"""Common Pydantic v2 schemas shared across the API."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error message")


class HealthResponse(BaseModel):
    """Liveness probe response."""

    status: str = Field(description="Service status")
