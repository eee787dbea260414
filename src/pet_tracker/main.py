"""FastAPI application factory.

Creates the FastAPI app with lifespan management, exception handlers,
and the collaborators used by the sighting resolver.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from pet_tracker.core.config import get_settings
from pet_tracker.core.database import dispose_engine, init_engine
from pet_tracker.core.logging import setup_logging
from pet_tracker.core.metrics import SightingMetrics
from pet_tracker.lib.geocoder import get_reverse_geocoder


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifecycle: init engine on startup, dispose on shutdown."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)
    init_engine(settings.database_url, echo=False)

    if not app.state.geocoder.is_configured:
        logger.warning("PositionStack API key not set; sightings will stay unresolved")

    yield

    await dispose_engine()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Pet Tracker API",
        description="Pet-tracking sensor sightings with reverse-geocoded place enrichment",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.geocoder = get_reverse_geocoder(settings)
    app.state.metrics = SightingMetrics()

    # Register exception handlers
    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc)},
        )

    # Register middleware and routers
    from pet_tracker.api.router import create_router, setup_middleware

    setup_middleware(app, settings)
    app.include_router(create_router(settings))

    return app
