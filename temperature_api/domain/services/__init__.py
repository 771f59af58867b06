"""Pure domain services (no I/O)."""

from temperature_api.domain.services.temperature_validator import TemperatureValidator
from temperature_api.domain.services.temperature_converter import TemperatureConverter

__all__ = [
    "TemperatureValidator",
    "TemperatureConverter",
]
