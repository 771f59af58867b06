"""Service-level queries (health, info)."""

from temperature_api.application.queries.service.get_api_info import (
    GetApiInfoHandler,
    GetApiInfoResult,
)
from temperature_api.application.queries.service.check_health import (
    CheckHealthHandler,
    CheckHealthResult,
)

__all__ = [
    "GetApiInfoHandler",
    "GetApiInfoResult",
    "CheckHealthHandler",
    "CheckHealthResult",
]
