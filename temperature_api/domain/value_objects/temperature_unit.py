"""
TemperatureUnit Value Object - The two supported temperature scales.
"""

from __future__ import annotations
from enum import Enum
from temperature_api.domain.constants import (
    ABSOLUTE_ZERO_CELSIUS,
    ABSOLUTE_ZERO_FAHRENHEIT,
)


class TemperatureUnit(str, Enum):
    """Temperature scale with its symbol, display name and absolute zero."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    @property
    def symbol(self) -> str:
        return "°C" if self is TemperatureUnit.CELSIUS else "°F"

    @property
    def display_name(self) -> str:
        return "Celsius" if self is TemperatureUnit.CELSIUS else "Fahrenheit"

    @property
    def absolute_zero(self) -> float:
        if self is TemperatureUnit.CELSIUS:
            return ABSOLUTE_ZERO_CELSIUS
        return ABSOLUTE_ZERO_FAHRENHEIT

    @classmethod
    def from_string(cls, unit: str) -> TemperatureUnit:
        """
        Parse a unit name or symbol (case-insensitive).

        Accepts: Celsius, C, °C, Fahrenheit, F, °F
        """
        if unit is None or not unit.strip():
            raise ValueError("Temperature unit cannot be empty")

        normalized = unit.strip().upper()
        if normalized in {"CELSIUS", "C", "°C"}:
            return cls.CELSIUS
        if normalized in {"FAHRENHEIT", "F", "°F"}:
            return cls.FAHRENHEIT

        raise ValueError(
            f"Invalid temperature unit: {unit}. "
            "Valid units are: Celsius, C, °C, Fahrenheit, F, °F"
        )

    def __str__(self) -> str:
        return f"{self.display_name} ({self.symbol})"
