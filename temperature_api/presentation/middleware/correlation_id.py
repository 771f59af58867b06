"""Correlation ID middleware - ties log lines of one request together."""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from temperature_api.config.logging_config import (
    DEFAULT_CORRELATION_ID,
    correlation_id_var,
)

CORRELATION_ID_HEADER = "X-Correlation-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_ID_HEADER, DEFAULT_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response
