"""
InvalidTemperatureError - Raised when a value fails range/number validation.
Maps to: HTTP 400 Bad Request

Each failure carries its kind plus the offending value, unit and limit so
callers can render a precise message without re-deriving it.
"""

from __future__ import annotations
from enum import Enum
from typing import Optional
from temperature_api.domain.constants import (
    ABSOLUTE_ZERO_CELSIUS,
    ABSOLUTE_ZERO_FAHRENHEIT,
)
from temperature_api.domain.exceptions.temperature_conversion_error import (
    TemperatureConversionError,
)
from temperature_api.domain.value_objects.temperature_unit import TemperatureUnit


class InvalidTemperatureKind(str, Enum):
    NULL_VALUE = "NULL_VALUE"
    BELOW_ABSOLUTE_ZERO = "BELOW_ABSOLUTE_ZERO"
    EXCEEDS_MAXIMUM = "EXCEEDS_MAXIMUM"
    NOT_A_NUMBER = "NOT_A_NUMBER"
    INFINITE = "INFINITE"


class InvalidTemperatureError(TemperatureConversionError):
    """Temperature value outside physical/practical bounds, NaN, infinite or missing."""

    ERROR_CODE = "INVALID_TEMPERATURE_VALUE"

    def __init__(
        self,
        kind: InvalidTemperatureKind,
        message: str,
        invalid_value: Optional[float] = None,
        unit: Optional[TemperatureUnit] = None,
        max_limit: Optional[float] = None,
    ):
        super().__init__(message, self.ERROR_CODE, invalid_value, unit)
        self.kind = kind
        self.invalid_value = invalid_value
        self.unit = unit
        self.max_limit = max_limit

    @classmethod
    def null_value(cls, unit: TemperatureUnit) -> InvalidTemperatureError:
        return cls(
            InvalidTemperatureKind.NULL_VALUE,
            "Temperature value cannot be null",
            unit=unit,
        )

    @classmethod
    def below_absolute_zero(
        cls, value: float, unit: TemperatureUnit
    ) -> InvalidTemperatureError:
        message = (
            f"Temperature {value:.2f}{unit.symbol} is below absolute zero. "
            f"Absolute zero is {ABSOLUTE_ZERO_CELSIUS:.2f}°C "
            f"({ABSOLUTE_ZERO_FAHRENHEIT:.2f}°F)."
        )
        return cls(
            InvalidTemperatureKind.BELOW_ABSOLUTE_ZERO,
            message,
            invalid_value=value,
            unit=unit,
        )

    @classmethod
    def exceeds_maximum(
        cls, value: float, unit: TemperatureUnit, max_limit: float
    ) -> InvalidTemperatureError:
        message = (
            f"Temperature {value:.2f}{unit.symbol} exceeds the maximum limit "
            f"of {max_limit:.1f} degrees."
        )
        return cls(
            InvalidTemperatureKind.EXCEEDS_MAXIMUM,
            message,
            invalid_value=value,
            unit=unit,
            max_limit=max_limit,
        )

    @classmethod
    def not_a_number(
        cls, value: float, unit: TemperatureUnit
    ) -> InvalidTemperatureError:
        return cls(
            InvalidTemperatureKind.NOT_A_NUMBER,
            "Temperature value cannot be NaN (Not a Number)",
            invalid_value=value,
            unit=unit,
        )

    @classmethod
    def infinite(cls, value: float, unit: TemperatureUnit) -> InvalidTemperatureError:
        return cls(
            InvalidTemperatureKind.INFINITE,
            "Temperature value cannot be infinite",
            invalid_value=value,
            unit=unit,
        )
