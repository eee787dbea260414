"""Sighting service — records sensor pings and resolves them to places.

A sighting is committed unresolved first, then reverse geocoded in the same
call. Reads retry resolution for sightings that are still unresolved.
Resolution is best-effort: provider failures are logged and counted, never
raised to the caller.
"""

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pet_tracker.core.metrics import SightingMetrics
from pet_tracker.lib.geocoder.base import BaseReverseGeocoder, GeocodingProviderError, ReverseGeocodeResult
from pet_tracker.models.sighting import Sighting
from pet_tracker.schemas.sighting import SightingCreateRequest


class SightingNotFoundError(LookupError):
    """Raised when a sensor has no recorded sightings."""

    def __init__(self, sensor_id: str) -> None:
        self.sensor_id = sensor_id
        super().__init__(f"No sighting found for sensor: {sensor_id}")


def build_address(result: ReverseGeocodeResult) -> str:
    """Pick the street name, falling back to the place name.

    Args:
        result: Provider result.

    Returns:
        The trimmed street or name, or an empty string if neither is set.
    """
    if result.street:
        return result.street.strip()
    if result.name:
        return result.name.strip()
    return ""


async def record_sighting(
    session: AsyncSession,
    request: SightingCreateRequest,
    *,
    geocoder: BaseReverseGeocoder,
    metrics: SightingMetrics,
) -> Sighting:
    """Persist a new sighting and try to resolve its place.

    Args:
        session: Database session.
        request: Validated sighting payload.
        geocoder: Reverse geocoder used for enrichment.
        metrics: Counters sink.

    Returns:
        The stored sighting, resolved if the provider answered.
    """
    logger.info(f"Recording sighting for sensor {request.sensor_id}")

    sighting = Sighting(
        sensor_id=request.sensor_id,
        latitude=request.latitude,
        longitude=request.longitude,
        observed_at=request.observed_at,
        resolved=False,
    )
    session.add(sighting)
    await session.commit()
    await session.refresh(sighting)
    metrics.record_recorded()

    await resolve_sighting(session, sighting, geocoder=geocoder, metrics=metrics)

    logger.info(f"Sighting {sighting.id} recorded (resolved={sighting.resolved})")
    return sighting


async def get_latest_sighting(
    session: AsyncSession,
    sensor_id: str,
    *,
    geocoder: BaseReverseGeocoder,
    metrics: SightingMetrics,
) -> Sighting:
    """Return the most recently observed sighting for a sensor.

    Unresolved sightings are resolved before being returned.

    Args:
        session: Database session.
        sensor_id: Sensor identifier.
        geocoder: Reverse geocoder used for lazy enrichment.
        metrics: Counters sink.

    Returns:
        The sighting with the latest ``observed_at``.

    Raises:
        ValueError: If sensor_id is blank.
        SightingNotFoundError: If the sensor has no sightings.
    """
    if not sensor_id or not sensor_id.strip():
        msg = "sensor_id must not be blank"
        raise ValueError(msg)

    result = await session.execute(
        select(Sighting)
        .where(Sighting.sensor_id == sensor_id)
        .order_by(Sighting.observed_at.desc(), Sighting.created_at.desc(), Sighting.id.desc())
        .limit(1)
    )
    sighting = result.scalar_one_or_none()
    if sighting is None:
        logger.warning(f"No sighting found for sensor {sensor_id}")
        raise SightingNotFoundError(sensor_id)

    if not sighting.resolved:
        await resolve_sighting(session, sighting, geocoder=geocoder, metrics=metrics)

    return sighting


async def resolve_sighting(
    session: AsyncSession,
    sighting: Sighting,
    *,
    geocoder: BaseReverseGeocoder,
    metrics: SightingMetrics,
) -> bool:
    """Fill in place fields for a sighting from its coordinates.

    Provider errors leave the sighting unresolved and bump the API error
    counter. An empty result leaves it unresolved without counting an error.
    Errors committing the update propagate.

    Args:
        session: Database session.
        sighting: The sighting to enrich.
        geocoder: Reverse geocoder.
        metrics: Counters sink.

    Returns:
        True if the sighting was resolved and saved.
    """
    latitude, longitude = sighting.latitude, sighting.longitude
    logger.debug(f"Resolving sighting {sighting.id} at {latitude},{longitude} via {geocoder.provider_name}")

    try:
        place = await geocoder.reverse(latitude, longitude)
    except GeocodingProviderError as e:
        logger.error(f"Error resolving coordinates {latitude},{longitude}: {e}")
        metrics.record_api_error()
        return False
    except Exception as e:
        logger.error(f"Unexpected error resolving coordinates {latitude},{longitude}: {type(e).__name__} - {e}")
        metrics.record_api_error()
        return False

    if place is None:
        logger.warning(f"Reverse geocoding returned no result for {latitude},{longitude}")
        return False

    sighting.country = place.country
    sighting.state = place.administrative_area
    sighting.city = place.locality
    sighting.neighborhood = place.neighbourhood
    sighting.address = build_address(place)
    sighting.resolved = True
    await session.commit()
    metrics.record_resolved()

    logger.info(f"Sighting {sighting.id} resolved: country={place.country}, city={place.locality}")
    return True


async def resolve_pending_sightings(
    session: AsyncSession,
    *,
    geocoder: BaseReverseGeocoder,
    metrics: SightingMetrics,
    limit: int = 100,
) -> tuple[int, int]:
    """Resolve a batch of sightings that are still unresolved.

    Oldest sightings are attempted first. Resolved sightings are never
    selected, so they are never sent to the provider again.

    Args:
        session: Database session.
        geocoder: Reverse geocoder.
        metrics: Counters sink.
        limit: Maximum number of sightings to attempt.

    Returns:
        Tuple of (attempted, resolved) counts.
    """
    result = await session.execute(
        select(Sighting)
        .where(Sighting.resolved.is_(False))
        .order_by(Sighting.created_at.asc(), Sighting.id.asc())
        .limit(limit)
    )
    pending = list(result.scalars().all())
    logger.info(f"Found {len(pending)} unresolved sightings")

    resolved = 0
    for sighting in pending:
        if await resolve_sighting(session, sighting, geocoder=geocoder, metrics=metrics):
            resolved += 1

    logger.info(f"Resolved {resolved}/{len(pending)} pending sightings")
    return len(pending), resolved
