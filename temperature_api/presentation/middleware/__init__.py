"""HTTP middleware (correlation id, metrics)."""

from temperature_api.presentation.middleware.correlation_id import (
    CORRELATION_ID_HEADER,
    CorrelationIdMiddleware,
)
from temperature_api.presentation.middleware.metrics_middleware import MetricsMiddleware

__all__ = [
    "CORRELATION_ID_HEADER",
    "CorrelationIdMiddleware",
    "MetricsMiddleware",
]
