"""
TemperatureValidator - Checks a value against the bounds of its scale.

Order of checks: null, below absolute zero, above maximum, NaN, infinite.
Range comparisons only apply to finite numbers, so NaN and ±infinity always
surface as their own kinds.
"""

import math
from typing import Optional
from temperature_api.domain.constants import MAX_REASONABLE_TEMPERATURE
from temperature_api.domain.exceptions import InvalidTemperatureError
from temperature_api.domain.value_objects.temperature_unit import TemperatureUnit
from temperature_api.domain.value_objects.temperature_value import TemperatureValue


class TemperatureValidator:
    def __init__(self, max_temperature: float = MAX_REASONABLE_TEMPERATURE):
        self.max_temperature = max_temperature

    def validate(
        self, value: Optional[float], unit: TemperatureUnit
    ) -> TemperatureValue:
        """
        Validate a raw value for the given unit.

        Returns:
            TemperatureValue once the value is known to be in range

        Raises:
            InvalidTemperatureError: with the kind of the first failed check
        """
        if value is None:
            raise InvalidTemperatureError.null_value(unit)

        try:
            value = float(value)
        except OverflowError:
            # Integers beyond the float range
            raise InvalidTemperatureError.infinite(
                math.inf if value > 0 else -math.inf, unit
            ) from None
        finite = math.isfinite(value)

        if finite and value < unit.absolute_zero:
            raise InvalidTemperatureError.below_absolute_zero(value, unit)

        if finite and value > self.max_temperature:
            raise InvalidTemperatureError.exceeds_maximum(
                value, unit, self.max_temperature
            )

        if math.isnan(value):
            raise InvalidTemperatureError.not_a_number(value, unit)

        if math.isinf(value):
            raise InvalidTemperatureError.infinite(value, unit)

        return TemperatureValue(value=value, unit=unit)
