"""
Prometheus metrics for application monitoring.
"""

from fastapi.responses import Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    Info,
    generate_latest,
)

# ==================== Registry ====================


def create_registry() -> CollectorRegistry:
    """Create the registry that holds every application metric."""
    return CollectorRegistry(auto_describe=True)


REGISTRY = create_registry()


# ==================== Application Info ====================

APP_INFO = Info(
    "catalog_app",
    "Application information",
    registry=REGISTRY,
)


# ==================== HTTP Metrics ====================

HTTP_REQUEST_COUNT = Counter(
    "catalog_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
    registry=REGISTRY,
)

HTTP_REQUEST_LATENCY = Histogram(
    "catalog_http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
    registry=REGISTRY,
)


# ==================== Error Metrics ====================

ERRORS_TOTAL = Counter(
    "catalog_errors_total",
    "Error responses by error code",
    ["code"],
    registry=REGISTRY,
)


# ==================== Helpers ====================


def set_app_info(name: str, version: str) -> None:
    """Publish static application info."""
    APP_INFO.info({"name": name, "version": version})


async def metrics_endpoint() -> Response:
    """Render every metric in the Prometheus exposition format."""
    return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)
