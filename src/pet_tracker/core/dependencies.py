"""FastAPI dependency injection for database sessions and resolver collaborators.

The geocoder and the metrics sink are created once in ``create_app`` and kept
on ``app.state``; tests replace them through ``app.dependency_overrides``.
"""

from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from pet_tracker.core.database import get_session_factory
from pet_tracker.core.metrics import SightingMetrics
from pet_tracker.lib.geocoder.base import BaseReverseGeocoder


async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Yield an async database session with per-request lifecycle."""
    factory = get_session_factory()
    async with factory() as session:
        yield session


def get_geocoder(request: Request) -> BaseReverseGeocoder:
    """Return the application's reverse geocoder."""
    return request.app.state.geocoder


def get_metrics(request: Request) -> SightingMetrics:
    """Return the application's metrics sink."""
    return request.app.state.metrics
