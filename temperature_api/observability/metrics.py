"""
Prometheus Metrics for the Temperature Conversion API.

DATA FLOW:
    This file                  presentation/api/metrics.py         Scraper
    ─────────                  ────────────────────────────         ───────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus

METRIC TYPES:
    - Counter: Value only goes up (total conversions, rejected inputs)
    - Histogram: Distribution (request latency percentiles)
"""

from prometheus_client import (
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5],
)

CONVERSIONS_TOTAL = Counter(
    "temperature_conversions_total",
    "Total number of successful conversions by direction",
    ["direction"],
)

INVALID_TEMPERATURE_TOTAL = Counter(
    "temperature_invalid_total",
    "Total number of rejected temperature inputs by kind",
    ["kind"],
)

ERRORS_TOTAL = Counter(
    "temperature_errors_total",
    "Total number of errors by type",
    ["error_type"],
)


# =============================================================================
# LABEL CONSTANTS
# =============================================================================
class MetricsErrorType:
    """Error type labels for temperature_errors_total metric."""

    VALIDATION_FAILED = "validation_failed"
    CONVERSION_FAILED = "conversion_failed"
    INTERNAL = "internal"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Call to record request latency. Integration point: presentation/middleware/metrics_middleware.py"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_conversion(direction: str):
    """Call after a successful conversion. Integration point: ConvertTemperatureHandler"""
    CONVERSIONS_TOTAL.labels(direction=direction).inc()


def increment_invalid_temperature(kind: str):
    """Call when the validator rejects an input. Integration point: ConvertTemperatureHandler"""
    INVALID_TEMPERATURE_TOTAL.labels(kind=kind).inc()


def increment_error(error_type: str):
    """
    Call to record an error occurrence.

    Integration points:
        - fastapi_app.py exception handlers

    Args:
        error_type: One of MetricsErrorType
    """
    ERRORS_TOTAL.labels(error_type=error_type).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Called by: presentation/api/metrics.py

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "observe_request_latency",
    "increment_conversion",
    "increment_invalid_temperature",
    "increment_error",
    "get_metrics_content",
    "MetricsErrorType",
]
