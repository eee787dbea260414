"""Pydantic v2 schemas for sighting requests and responses."""

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_validator


class SightingCreateRequest(BaseModel):
    """A new ping reported by a pet-tracking sensor."""

    sensor_id: str = Field(..., min_length=1, max_length=100, description="Sensor identifier")
    latitude: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(..., ge=-180, le=180, allow_inf_nan=False)
    observed_at: datetime = Field(..., description="When the sensor observed the position")

    @field_validator("sensor_id")
    @classmethod
    def validate_sensor_id(cls, v: str) -> str:
        """Reject blank ids; the id is stored exactly as sent."""
        if not v.strip():
            msg = "sensor_id must not be blank"
            raise ValueError(msg)
        return v

    @field_validator("observed_at")
    @classmethod
    def normalize_observed_at(cls, v: datetime) -> datetime:
        """Store offset-aware timestamps in UTC so ordering is consistent."""
        if v.tzinfo is not None:
            return v.astimezone(UTC)
        return v


class SightingResponse(BaseModel):
    """A sighting with whatever place enrichment has been resolved so far."""

    model_config = {"from_attributes": True}

    id: uuid.UUID
    sensor_id: str
    latitude: float
    longitude: float
    observed_at: datetime
    country: str | None = None
    state: str | None = None
    city: str | None = None
    neighborhood: str | None = None
    address: str | None = None
    resolved: bool
    created_at: datetime
    updated_at: datetime
