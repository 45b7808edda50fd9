"""
Request processing middleware.
"""

import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from catalog.shared.context import clear_request_context, set_request_id, set_trace_id
from catalog.shared.logging import get_logger

from .metrics import HTTP_REQUEST_COUNT, HTTP_REQUEST_LATENCY

logger = get_logger(__name__)


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """Request tracing and logging middleware.

    Attaches a request ID to every request, records HTTP metrics and logs
    one line per served request.
    """

    # Endpoints skipped by per-request logging
    SKIP_LOG_ENDPOINTS: set[str] = {
        "/observability/health",
        "/observability/ready",
        "/observability/live",
        "/observability/metrics",
    }

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Serve the request with tracing and metrics."""
        request_id = (
            request.headers.get("X-Request-ID")
            or request.headers.get("X-Correlation-ID")
            or str(uuid.uuid4())
        )
        request.state.request_id = request_id
        set_request_id(request_id)
        set_trace_id(request_id)

        method = request.method
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
            duration = time.perf_counter() - start_time

            endpoint = self._get_endpoint(request)
            HTTP_REQUEST_COUNT.labels(
                method=method,
                endpoint=endpoint,
                status_code=response.status_code,
            ).inc()
            HTTP_REQUEST_LATENCY.labels(method=method, endpoint=endpoint).observe(duration)

            response.headers["X-Request-ID"] = request_id
            self._log_request(request, response, duration)
            return response

        except Exception:
            duration = time.perf_counter() - start_time
            endpoint = self._get_endpoint(request)

            HTTP_REQUEST_COUNT.labels(method=method, endpoint=endpoint, status_code=500).inc()
            HTTP_REQUEST_LATENCY.labels(method=method, endpoint=endpoint).observe(duration)
            # The exception handler logs the failure and renders the response
            raise

        finally:
            clear_request_context()

    def _get_endpoint(self, request: Request) -> str:
        """Normalized endpoint for metric labels.

        Uses the matched route template so path parameters do not explode
        label cardinality.
        """
        route = request.scope.get("route")
        if route is not None and hasattr(route, "path"):
            return route.path
        return request.url.path

    def _log_request(self, request: Request, response: Response, duration: float) -> None:
        """Log request details."""
        if request.url.path in self.SKIP_LOG_ENDPOINTS:
            return

        log_level = "info" if response.status_code < 400 else "warning"
        if response.status_code >= 500:
            log_level = "error"

        # Constant message: loguru formats it with the kwargs, and paths may hold braces
        getattr(logger, log_level)(
            "Request served",
            method=request.method,
            path=str(request.url.path),
            query_string=str(request.query_params) if request.query_params else None,
            status_code=response.status_code,
            duration_ms=round(duration * 1000, 2),
        )
