"""Health and metrics endpoints"""

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response

from catalog.core.config import settings
from catalog.core.dependencies import Store
from catalog.core.metrics import metrics_endpoint
from catalog.shared.schemas import HealthResponse

router = APIRouter(prefix="/observability", tags=["System"])


@router.get("/health", response_model=HealthResponse)
async def health_check(store: Store) -> HealthResponse:
    """Health check endpoint for load balancer.

    Reports the item count instead of calling list_all(), which is subject
    to simulated failures.
    """
    dependencies = {
        "catalog_store": "healthy",
        "items": str(store.count()),
    }
    return HealthResponse(status="healthy", version=settings.app.version, dependencies=dependencies)


@router.get("/ready")
async def readiness_check(request: Request) -> dict[str, bool]:
    """Readiness check endpoint."""
    return {"ready": getattr(request.app.state, "store", None) is not None}


@router.get("/live")
async def liveness_check() -> dict[str, bool]:
    """Liveness check endpoint."""
    return {"alive": True}


@router.get("/metrics")
async def get_metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.metrics.enabled:
        raise HTTPException(status_code=404, detail="Metrics are disabled")
    return await metrics_endpoint()
