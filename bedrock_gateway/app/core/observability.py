import time
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from typing import Callable, Awaitable
import logging
from bedrock_gateway.app.core.logging import request_id_var
from bedrock_gateway.app.core.metrics import Metrics

logger = logging.getLogger(__name__)

UNMATCHED_ROUTE = "unmatched"


def route_label(request: Request) -> str:
    """Metrics key: the matched route template, never the raw path."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_ROUTE


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Request ID propagation, latency tracking and request logging."""

    def __init__(self, app, metrics: Metrics) -> None:
        super().__init__(app)
        self._metrics = metrics

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        request_id_var.set(request_id)

        start_time = time.time()
        endpoint = request.url.path
        log_data = {
            "request_id": request_id,
            "method": request.method,
            "endpoint": endpoint,
        }
        logger.info(f"Request started: {log_data}")

        try:
            response = await call_next(request)
        except Exception as e:
            elapsed = time.time() - start_time
            self._metrics.record_request(route_label(request), 500, elapsed)
            log_data.update({
                "status_code": 500,
                "elapsed_seconds": round(elapsed, 3),
                "error": str(e),
            })
            logger.error(f"Request failed: {log_data}", exc_info=True)
            raise

        elapsed = time.time() - start_time
        status_code = response.status_code
        self._metrics.record_request(route_label(request), status_code, elapsed)
        response.headers["X-Request-ID"] = request_id

        log_data.update({
            "status_code": status_code,
            "elapsed_seconds": round(elapsed, 3),
        })
        logger.info(f"Request completed: {log_data}")
        return response
