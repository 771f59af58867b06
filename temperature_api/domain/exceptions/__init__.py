"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from temperature_api.domain.exceptions.temperature_conversion_error import (
    TemperatureConversionError,
)
from temperature_api.domain.exceptions.invalid_temperature import (
    InvalidTemperatureError,
    InvalidTemperatureKind,
)

__all__ = [
    "TemperatureConversionError",
    "InvalidTemperatureError",
    "InvalidTemperatureKind",
]
