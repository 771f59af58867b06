"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- conversions/ → convert_temperature
- service/     → get_api_info, check_health
"""

from temperature_api.application.queries.conversions import (
    ConvertTemperatureQuery,
    ConvertTemperatureHandler,
    ConvertTemperatureResult,
)
from temperature_api.application.queries.service import (
    GetApiInfoHandler,
    GetApiInfoResult,
    CheckHealthHandler,
    CheckHealthResult,
)

__all__ = [
    # conversions
    "ConvertTemperatureQuery",
    "ConvertTemperatureHandler",
    "ConvertTemperatureResult",
    # service
    "GetApiInfoHandler",
    "GetApiInfoResult",
    "CheckHealthHandler",
    "CheckHealthResult",
]
