"""Conversion queries."""

from temperature_api.application.queries.conversions.convert_temperature import (
    ConvertTemperatureQuery,
    ConvertTemperatureHandler,
    ConvertTemperatureResult,
)

__all__ = [
    "ConvertTemperatureQuery",
    "ConvertTemperatureHandler",
    "ConvertTemperatureResult",
]
