"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value)
- Is immutable (frozen dataclass or enum)
- Pure Python (no framework dependencies)
"""

from temperature_api.domain.value_objects.temperature_unit import TemperatureUnit
from temperature_api.domain.value_objects.temperature_value import TemperatureValue
from temperature_api.domain.value_objects.conversion_direction import (
    ConversionDirection,
)

__all__ = [
    "TemperatureUnit",
    "TemperatureValue",
    "ConversionDirection",
]
