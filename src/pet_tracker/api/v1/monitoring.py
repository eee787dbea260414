"""Health check and Prometheus metrics endpoints."""

from fastapi import APIRouter, Depends, Response
from prometheus_client import CONTENT_TYPE_LATEST

from pet_tracker.core.dependencies import get_metrics
from pet_tracker.core.metrics import SightingMetrics
from pet_tracker.schemas.common import HealthResponse

monitoring_router = APIRouter(tags=["monitoring"])


@monitoring_router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe."""
    return HealthResponse(status="healthy")


@monitoring_router.get("/metrics", response_class=Response)
async def metrics_endpoint(metrics: SightingMetrics = Depends(get_metrics)) -> Response:
    """Expose sighting counters in the Prometheus text format."""
    return Response(content=metrics.export(), media_type=CONTENT_TYPE_LATEST)
