"""Request latency middleware feeding http_server_request_duration_seconds."""

import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from temperature_api.observability import observe_request_latency


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start

        # Use the route template, not the raw path, to keep label cardinality low
        route = request.scope.get("route")
        route_path = getattr(route, "path", None) or "unmatched"

        observe_request_latency(
            method=request.method,
            route=route_path,
            status_code=response.status_code,
            duration=duration,
        )
        return response
