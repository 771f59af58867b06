"""Observability package for the Temperature Conversion API."""

from temperature_api.observability.metrics import (
    observe_request_latency,
    increment_conversion,
    increment_invalid_temperature,
    increment_error,
    get_metrics_content,
    MetricsErrorType,
)

__all__ = [
    "observe_request_latency",
    "increment_conversion",
    "increment_invalid_temperature",
    "increment_error",
    "get_metrics_content",
    "MetricsErrorType",
]
