"""Sighting model — one geolocation ping from a pet-tracking sensor.

A sighting starts unresolved and is enriched in place, once, when a reverse
geocoding lookup succeeds. Place columns stay NULL until then.
"""

from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, Double, Index, String, false, func
from sqlalchemy.orm import Mapped, mapped_column

from pet_tracker.models.base import Base, UUIDMixin


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Sighting(Base, UUIDMixin):
    """A sensor ping with coordinates and optional place enrichment."""

    __tablename__ = "sightings"

    sensor_id: Mapped[str] = mapped_column(String(100), nullable=False)
    latitude: Mapped[float] = mapped_column(Double, nullable=False)
    longitude: Mapped[float] = mapped_column(Double, nullable=False)
    observed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    # Place enrichment
    country: Mapped[str | None] = mapped_column(String, nullable=True)
    state: Mapped[str | None] = mapped_column(String, nullable=True)
    city: Mapped[str | None] = mapped_column(String, nullable=True)
    neighborhood: Mapped[str | None] = mapped_column(String, nullable=True)
    address: Mapped[str | None] = mapped_column(String, nullable=True)
    resolved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())
    # Client-side so the value is loaded on the instance, not expired after flush
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    __table_args__ = (Index("ix_sightings_sensor_observed", "sensor_id", "observed_at"),)

    def __repr__(self) -> str:
        return f"<Sighting {self.id} sensor={self.sensor_id!r} resolved={self.resolved}>"
