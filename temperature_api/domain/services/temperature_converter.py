"""
TemperatureConverter - Celsius/Fahrenheit conversion with decimal rounding.

Formulas:
- Celsius to Fahrenheit: F = (C × 9/5) + 32
- Fahrenheit to Celsius: C = (F - 32) × 5/9

Arithmetic runs on Decimal built from the float's shortest repr, so 37°C
gives exactly 98.6°F. The division keeps GUARD_DIGITS extra places before
the final ROUND_HALF_UP to DECIMAL_PRECISION places.
"""

from decimal import Decimal, localcontext
from logging import getLogger
from typing import Optional
from temperature_api.domain.constants import (
    BODY_TEMPERATURE_CELSIUS,
    BODY_TEMPERATURE_TOLERANCE,
    DECIMAL_PRECISION,
    FIXED_POINT_TOLERANCE,
    GUARD_DIGITS,
    ROOM_TEMPERATURE_RANGE,
    ROUNDING_MODE,
    ABSOLUTE_ZERO_CELSIUS,
    ABSOLUTE_ZERO_FAHRENHEIT,
)
from temperature_api.domain.entities.conversion_result import ConversionResult
from temperature_api.domain.services.temperature_validator import TemperatureValidator
from temperature_api.domain.value_objects import (
    ConversionDirection,
    TemperatureUnit,
    TemperatureValue,
)

logger = getLogger(__name__)

_GUARD_QUANTUM = Decimal(1).scaleb(-(DECIMAL_PRECISION + GUARD_DIGITS))
_RESULT_QUANTUM = Decimal(1).scaleb(-DECIMAL_PRECISION)
# Enough digits to quantize any finite float to the guard places
_WORKING_PRECISION = 400


def _to_decimal(value: float) -> Decimal:
    return Decimal(repr(value))


def _round(value: Decimal) -> float:
    return float(value.quantize(_RESULT_QUANTUM, rounding=ROUNDING_MODE))


class TemperatureConverter:
    def __init__(self, validator: TemperatureValidator):
        self._validator = validator

    # ==================== CONVERSIONS ====================

    def celsius_to_fahrenheit(self, celsius: Optional[float]) -> ConversionResult:
        original = self._validator.validate(celsius, TemperatureUnit.CELSIUS)

        with localcontext() as ctx:
            ctx.prec = _WORKING_PRECISION
            fahrenheit = (_to_decimal(original.value) * 9 / 5).quantize(
                _GUARD_QUANTUM, rounding=ROUNDING_MODE
            ) + 32
            converted = _round(fahrenheit)

        return self._build_result(
            original, converted, ConversionDirection.CELSIUS_TO_FAHRENHEIT
        )

    def fahrenheit_to_celsius(self, fahrenheit: Optional[float]) -> ConversionResult:
        original = self._validator.validate(fahrenheit, TemperatureUnit.FAHRENHEIT)

        with localcontext() as ctx:
            ctx.prec = _WORKING_PRECISION
            celsius = ((_to_decimal(original.value) - 32) * 5 / 9).quantize(
                _GUARD_QUANTUM, rounding=ROUNDING_MODE
            )
            converted = _round(celsius)

        return self._build_result(
            original, converted, ConversionDirection.FAHRENHEIT_TO_CELSIUS
        )

    def convert(
        self, value: Optional[float], direction: ConversionDirection
    ) -> ConversionResult:
        """Dispatch to the formula for the given direction."""
        if direction is ConversionDirection.CELSIUS_TO_FAHRENHEIT:
            return self.celsius_to_fahrenheit(value)
        return self.fahrenheit_to_celsius(value)

    def _build_result(
        self,
        original: TemperatureValue,
        converted_value: float,
        direction: ConversionDirection,
    ) -> ConversionResult:
        converted = TemperatureValue(converted_value, direction.target_unit)
        logger.debug(f"Converted {original} -> {converted}")
        return ConversionResult.create(
            original=original, converted=converted, formula=direction.formula
        )

    # ==================== CONTEXT HELPERS ====================

    @staticmethod
    def is_freezing_point(celsius: Optional[float]) -> bool:
        if celsius is None:
            return False
        return abs(celsius) < FIXED_POINT_TOLERANCE

    @staticmethod
    def is_boiling_point(celsius: Optional[float]) -> bool:
        if celsius is None:
            return False
        return abs(celsius - 100.0) < FIXED_POINT_TOLERANCE

    def context_label(self, celsius: Optional[float]) -> str:
        """Classify a Celsius value; first matching rule wins."""
        if celsius is None:
            return "invalid temperature"
        if self.is_freezing_point(celsius):
            return "freezing point"
        if self.is_boiling_point(celsius):
            return "boiling point"
        if abs(celsius - BODY_TEMPERATURE_CELSIUS) < BODY_TEMPERATURE_TOLERANCE:
            return "body temperature"
        if celsius < 0:
            return "below freezing"
        if celsius > 100:
            return "above boiling"
        low, high = ROOM_TEMPERATURE_RANGE
        if low <= celsius <= high:
            return "comfortable room temperature"
        return "normal temperature"

    def conversion_constants(self) -> dict[str, float]:
        return {
            "ABSOLUTE_ZERO_CELSIUS": ABSOLUTE_ZERO_CELSIUS,
            "ABSOLUTE_ZERO_FAHRENHEIT": ABSOLUTE_ZERO_FAHRENHEIT,
            "MAX_REASONABLE_TEMPERATURE": self._validator.max_temperature,
        }
