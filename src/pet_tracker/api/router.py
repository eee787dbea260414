"""Root API router with /api/v1 prefix and middleware registration."""

from fastapi import APIRouter, FastAPI

from pet_tracker.api.middleware import RequestLoggingMiddleware, setup_cors
from pet_tracker.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from pet_tracker.api.v1.monitoring import monitoring_router
    from pet_tracker.api.v1.sightings import sightings_router

    root_router = APIRouter(prefix=settings.api_v1_prefix)
    root_router.include_router(monitoring_router)
    root_router.include_router(sightings_router)

    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware on the FastAPI app.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    setup_cors(app, settings)
    app.add_middleware(RequestLoggingMiddleware)
