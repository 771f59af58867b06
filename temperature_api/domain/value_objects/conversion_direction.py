"""
ConversionDirection Value Object - Which of the two formulas to apply.
"""

from enum import Enum
from temperature_api.domain.constants import (
    CELSIUS_TO_FAHRENHEIT_FORMULA,
    FAHRENHEIT_TO_CELSIUS_FORMULA,
)
from temperature_api.domain.value_objects.temperature_unit import TemperatureUnit


class ConversionDirection(str, Enum):
    CELSIUS_TO_FAHRENHEIT = "celsius-to-fahrenheit"
    FAHRENHEIT_TO_CELSIUS = "fahrenheit-to-celsius"

    @property
    def source_unit(self) -> TemperatureUnit:
        if self is ConversionDirection.CELSIUS_TO_FAHRENHEIT:
            return TemperatureUnit.CELSIUS
        return TemperatureUnit.FAHRENHEIT

    @property
    def target_unit(self) -> TemperatureUnit:
        if self is ConversionDirection.CELSIUS_TO_FAHRENHEIT:
            return TemperatureUnit.FAHRENHEIT
        return TemperatureUnit.CELSIUS

    @property
    def formula(self) -> str:
        if self is ConversionDirection.CELSIUS_TO_FAHRENHEIT:
            return CELSIUS_TO_FAHRENHEIT_FORMULA
        return FAHRENHEIT_TO_CELSIUS_FORMULA
