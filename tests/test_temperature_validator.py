"""
Unit tests for TemperatureValidator.

Run with: pytest tests/test_temperature_validator.py -v
"""

import math
import pytest

from temperature_api.domain.exceptions import (
    InvalidTemperatureError,
    InvalidTemperatureKind,
    TemperatureConversionError,
)
from temperature_api.domain.services import TemperatureValidator
from temperature_api.domain.value_objects import TemperatureUnit, TemperatureValue


class TestAcceptedValues:
    """Values inside [absolute zero, max] come back as TemperatureValue."""

    @pytest.mark.parametrize(
        "value, unit",
        [
            (0.0, TemperatureUnit.CELSIUS),
            (-273.15, TemperatureUnit.CELSIUS),
            (10000.0, TemperatureUnit.CELSIUS),
            (-459.67, TemperatureUnit.FAHRENHEIT),
            (10000.0, TemperatureUnit.FAHRENHEIT),
        ],
    )
    def test_boundaries_are_inclusive(self, validator, value, unit):
        assert validator.validate(value, unit) == TemperatureValue(value, unit)

    def test_integer_input_is_coerced_to_float(self, validator):
        result = validator.validate(25, TemperatureUnit.CELSIUS)
        assert isinstance(result.value, float)
        assert result.value == 25.0

    def test_fahrenheit_value_below_celsius_absolute_zero_is_valid(self, validator):
        """-300°F is above -459.67°F even though it is below -273.15."""
        assert validator.validate(-300.0, TemperatureUnit.FAHRENHEIT).value == -300.0


class TestRejectedValues:
    def test_null_value(self, validator):
        with pytest.raises(InvalidTemperatureError) as exc_info:
            validator.validate(None, TemperatureUnit.CELSIUS)

        assert exc_info.value.kind is InvalidTemperatureKind.NULL_VALUE
        assert exc_info.value.invalid_value is None
        assert str(exc_info.value) == "Temperature value cannot be null"

    def test_below_absolute_zero_celsius(self, validator):
        with pytest.raises(InvalidTemperatureError) as exc_info:
            validator.validate(-273.16, TemperatureUnit.CELSIUS)

        error = exc_info.value
        assert error.kind is InvalidTemperatureKind.BELOW_ABSOLUTE_ZERO
        assert error.invalid_value == -273.16
        assert error.unit is TemperatureUnit.CELSIUS
        assert error.message == (
            "Temperature -273.16°C is below absolute zero. "
            "Absolute zero is -273.15°C (-459.67°F)."
        )

    def test_below_absolute_zero_fahrenheit_cites_both_scales(self, validator):
        with pytest.raises(InvalidTemperatureError) as exc_info:
            validator.validate(-500.0, TemperatureUnit.FAHRENHEIT)

        assert exc_info.value.kind is InvalidTemperatureKind.BELOW_ABSOLUTE_ZERO
        assert "-500.00°F" in exc_info.value.message
        assert "-273.15°C (-459.67°F)" in exc_info.value.message

    def test_exceeds_maximum(self, validator):
        with pytest.raises(InvalidTemperatureError) as exc_info:
            validator.validate(10000.01, TemperatureUnit.CELSIUS)

        error = exc_info.value
        assert error.kind is InvalidTemperatureKind.EXCEEDS_MAXIMUM
        assert error.max_limit == 10000.0
        assert error.message == (
            "Temperature 10000.01°C exceeds the maximum limit of 10000.0 degrees."
        )

    def test_not_a_number(self, validator):
        with pytest.raises(InvalidTemperatureError) as exc_info:
            validator.validate(float("nan"), TemperatureUnit.CELSIUS)

        assert exc_info.value.kind is InvalidTemperatureKind.NOT_A_NUMBER
        assert math.isnan(exc_info.value.invalid_value)

    @pytest.mark.parametrize("value", [math.inf, -math.inf])
    def test_infinite_is_not_reported_as_out_of_range(self, validator, value):
        with pytest.raises(InvalidTemperatureError) as exc_info:
            validator.validate(value, TemperatureUnit.FAHRENHEIT)

        assert exc_info.value.kind is InvalidTemperatureKind.INFINITE
        assert exc_info.value.message == "Temperature value cannot be infinite"

    @pytest.mark.parametrize("value, expected", [(10**400, math.inf), (-(10**400), -math.inf)])
    def test_integer_beyond_float_range_is_infinite(self, validator, value, expected):
        with pytest.raises(InvalidTemperatureError) as exc_info:
            validator.validate(value, TemperatureUnit.CELSIUS)

        assert exc_info.value.kind is InvalidTemperatureKind.INFINITE
        assert exc_info.value.invalid_value == expected

    def test_error_code_and_hierarchy(self, validator):
        with pytest.raises(TemperatureConversionError) as exc_info:
            validator.validate(-1000.0, TemperatureUnit.CELSIUS)

        assert exc_info.value.error_code == "INVALID_TEMPERATURE_VALUE"
        assert exc_info.value.error_args == (-1000.0, TemperatureUnit.CELSIUS)


class TestConfigurableMaximum:
    def test_custom_upper_bound(self):
        validator = TemperatureValidator(max_temperature=500.0)

        assert validator.validate(500.0, TemperatureUnit.CELSIUS).value == 500.0
        with pytest.raises(InvalidTemperatureError) as exc_info:
            validator.validate(500.5, TemperatureUnit.CELSIUS)

        assert exc_info.value.max_limit == 500.0
        assert "maximum limit of 500.0 degrees" in exc_info.value.message

    def test_absolute_zero_checked_before_maximum(self):
        """With a bound below absolute zero both checks apply; absolute zero wins."""
        validator = TemperatureValidator(max_temperature=-300.0)

        with pytest.raises(InvalidTemperatureError) as exc_info:
            validator.validate(-280.0, TemperatureUnit.CELSIUS)

        assert exc_info.value.kind is InvalidTemperatureKind.BELOW_ABSOLUTE_ZERO
