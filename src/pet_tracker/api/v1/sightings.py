"""Sighting API endpoints.

POST /sightings records a ping and resolves it synchronously;
GET /sightings/sensor/{sensor_id}/last returns the latest ping for a sensor,
resolving it first if an earlier attempt failed.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pet_tracker.core.dependencies import get_async_session, get_geocoder, get_metrics
from pet_tracker.core.metrics import SightingMetrics
from pet_tracker.lib.geocoder.base import BaseReverseGeocoder
from pet_tracker.schemas.common import ErrorResponse
from pet_tracker.schemas.sighting import SightingCreateRequest, SightingResponse
from pet_tracker.services.sighting_service import (
    SightingNotFoundError,
    get_latest_sighting,
    record_sighting,
)

sightings_router = APIRouter(prefix="/sightings", tags=["sightings"])


@sightings_router.post(
    "",
    response_model=SightingResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_sighting(
    body: SightingCreateRequest,
    session: AsyncSession = Depends(get_async_session),
    geocoder: BaseReverseGeocoder = Depends(get_geocoder),
    metrics: SightingMetrics = Depends(get_metrics),
) -> SightingResponse:
    """Record a sensor ping and try to resolve it to a place.

    The sighting is stored even when reverse geocoding fails; ``resolved``
    in the response tells whether enrichment succeeded.
    """
    logger.info(f"Received sighting for sensor {body.sensor_id}")
    try:
        sighting = await record_sighting(session, body, geocoder=geocoder, metrics=metrics)
    except SQLAlchemyError as e:
        logger.error(f"Database error recording sighting: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error recording sighting.",
        ) from e
    return SightingResponse.model_validate(sighting)


@sightings_router.get(
    "/sensor/{sensor_id}/last",
    response_model=SightingResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_last_sighting(
    sensor_id: str,
    session: AsyncSession = Depends(get_async_session),
    geocoder: BaseReverseGeocoder = Depends(get_geocoder),
    metrics: SightingMetrics = Depends(get_metrics),
) -> SightingResponse:
    """Return the most recently observed sighting for a sensor."""
    logger.info(f"Received request for last sighting of sensor {sensor_id}")
    try:
        sighting = await get_latest_sighting(session, sensor_id, geocoder=geocoder, metrics=metrics)
    except SightingNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except SQLAlchemyError as e:
        logger.error(f"Database error fetching last sighting: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error fetching sighting.",
        ) from e
    return SightingResponse.model_validate(sighting)
