"""
Unit tests for TemperatureConverter.

Run with: pytest tests/test_temperature_converter.py -v
"""

import math
import pytest

from temperature_api.domain.constants import (
    CELSIUS_TO_FAHRENHEIT_FORMULA,
    FAHRENHEIT_TO_CELSIUS_FORMULA,
)
from temperature_api.domain.exceptions import InvalidTemperatureError, InvalidTemperatureKind
from temperature_api.domain.services import TemperatureConverter, TemperatureValidator
from temperature_api.domain.value_objects import ConversionDirection, TemperatureUnit


class TestCelsiusToFahrenheit:
    @pytest.mark.parametrize(
        "celsius, expected",
        [
            (0, 32.0),
            (100, 212.0),
            (37, 98.6),
            (-40, -40.0),
            (25, 77.0),
            (-273.15, -459.67),
            (10000.0, 18032.0),
        ],
    )
    def test_fixed_points(self, converter, celsius, expected):
        assert converter.celsius_to_fahrenheit(celsius).converted_value == expected

    def test_result_fields(self, converter):
        result = converter.celsius_to_fahrenheit(37.0)

        assert result.original_value == 37.0
        assert result.original_unit is TemperatureUnit.CELSIUS
        assert result.converted_unit is TemperatureUnit.FAHRENHEIT
        assert result.formula == CELSIUS_TO_FAHRENHEIT_FORMULA
        assert result.created_at.tzinfo is not None

    def test_rounds_half_up(self, converter):
        """0.025°C is exactly 32.045°F; binary floats would round it down."""
        assert converter.celsius_to_fahrenheit(0.025).converted_value == 32.05

    def test_two_decimal_places(self, converter):
        assert converter.celsius_to_fahrenheit(12.345).converted_value == 54.22


class TestFahrenheitToCelsius:
    @pytest.mark.parametrize(
        "fahrenheit, expected",
        [
            (32, 0.0),
            (212, 100.0),
            (98.6, 37.0),
            (-40, -40.0),
            (-459.67, -273.15),
        ],
    )
    def test_inverse_points(self, converter, fahrenheit, expected):
        assert converter.fahrenheit_to_celsius(fahrenheit).converted_value == expected

    def test_result_fields(self, converter):
        result = converter.fahrenheit_to_celsius(212.0)

        assert result.original_unit is TemperatureUnit.FAHRENHEIT
        assert result.converted_unit is TemperatureUnit.CELSIUS
        assert result.formula == FAHRENHEIT_TO_CELSIUS_FORMULA

    def test_rounds_half_up(self, converter):
        """32.009°F is exactly 0.005°C."""
        assert converter.fahrenheit_to_celsius(32.009).converted_value == 0.01


class TestRoundTrip:
    @pytest.mark.parametrize(
        "celsius",
        [-273.15, -100.5, -40.0, -0.01, 0.0, 12.345, 36.6, 99.99, 1234.567, 5537.0],
    )
    def test_round_trip_within_tolerance(self, converter, celsius):
        fahrenheit = converter.celsius_to_fahrenheit(celsius).converted_value
        back = converter.fahrenheit_to_celsius(fahrenheit).converted_value

        assert back == pytest.approx(celsius, abs=0.01)

    def test_round_trip_over_full_celsius_range(self):
        """Above ~5537.78°C the Fahrenheit value itself exceeds the default bound."""
        converter = TemperatureConverter(TemperatureValidator(max_temperature=20000.0))

        for celsius in (5600.0, 7777.77, 10000.0):
            fahrenheit = converter.celsius_to_fahrenheit(celsius).converted_value
            back = converter.fahrenheit_to_celsius(fahrenheit).converted_value
            assert back == pytest.approx(celsius, abs=0.01)

    def test_fahrenheit_image_of_large_celsius_is_rejected_by_default(self, converter):
        fahrenheit = converter.celsius_to_fahrenheit(10000.0).converted_value

        with pytest.raises(InvalidTemperatureError) as exc_info:
            converter.fahrenheit_to_celsius(fahrenheit)

        assert exc_info.value.kind is InvalidTemperatureKind.EXCEEDS_MAXIMUM


class TestLargeUpperBound:
    """A raised bound must not push the decimal arithmetic out of range."""

    def test_celsius_to_fahrenheit_far_above_default_bound(self):
        converter = TemperatureConverter(TemperatureValidator(max_temperature=1e30))

        result = converter.celsius_to_fahrenheit(1e25)

        assert result.converted_value == pytest.approx(1.8e25)

    def test_fahrenheit_to_celsius_far_above_default_bound(self):
        converter = TemperatureConverter(TemperatureValidator(max_temperature=1e30))

        result = converter.fahrenheit_to_celsius(1e25)

        assert result.converted_value == pytest.approx((1e25 - 32) * 5 / 9)

    def test_largest_float_bound(self):
        converter = TemperatureConverter(TemperatureValidator(max_temperature=1e308))

        result = converter.fahrenheit_to_celsius(1e308)

        assert result.converted_value == pytest.approx(1e308 * 5 / 9)

class TestValidationPropagates:
    @pytest.mark.parametrize(
        "value, kind",
        [
            (None, InvalidTemperatureKind.NULL_VALUE),
            (-273.16, InvalidTemperatureKind.BELOW_ABSOLUTE_ZERO),
            (10000.01, InvalidTemperatureKind.EXCEEDS_MAXIMUM),
            (float("nan"), InvalidTemperatureKind.NOT_A_NUMBER),
            (math.inf, InvalidTemperatureKind.INFINITE),
        ],
    )
    def test_celsius_failures(self, converter, value, kind):
        with pytest.raises(InvalidTemperatureError) as exc_info:
            converter.celsius_to_fahrenheit(value)

        assert exc_info.value.kind is kind
        assert exc_info.value.unit is TemperatureUnit.CELSIUS

    def test_fahrenheit_uses_fahrenheit_absolute_zero(self, converter):
        with pytest.raises(InvalidTemperatureError) as exc_info:
            converter.fahrenheit_to_celsius(-459.68)

        assert exc_info.value.kind is InvalidTemperatureKind.BELOW_ABSOLUTE_ZERO
        assert exc_info.value.unit is TemperatureUnit.FAHRENHEIT


class TestConvertDispatch:
    def test_convert_matches_direct_calls(self, converter):
        c2f = converter.convert(37.0, ConversionDirection.CELSIUS_TO_FAHRENHEIT)
        f2c = converter.convert(98.6, ConversionDirection.FAHRENHEIT_TO_CELSIUS)

        assert c2f.converted_value == 98.6
        assert f2c.converted_value == 37.0

    def test_idempotent(self, converter):
        first = converter.celsius_to_fahrenheit(21.5)
        second = converter.celsius_to_fahrenheit(21.5)

        assert first.converted_value == second.converted_value
        assert first.formula == second.formula


class TestContextHelpers:
    @pytest.mark.parametrize(
        "celsius, label",
        [
            (0, "freezing point"),
            (100, "boiling point"),
            (37, "body temperature"),
            (22, "comfortable room temperature"),
            (-10, "below freezing"),
            (150, "above boiling"),
            (50, "normal temperature"),
        ],
    )
    def test_context_label(self, converter, celsius, label):
        assert converter.context_label(celsius) == label

    @pytest.mark.parametrize(
        "celsius, label",
        [
            (-0.005, "freezing point"),
            (99.995, "boiling point"),
            (37.49, "body temperature"),
            (36.5, "normal temperature"),
            (20.0, "comfortable room temperature"),
            (25.0, "comfortable room temperature"),
            (25.01, "normal temperature"),
            (None, "invalid temperature"),
        ],
    )
    def test_context_label_priority_and_edges(self, converter, celsius, label):
        assert converter.context_label(celsius) == label

    def test_fixed_point_predicates(self, converter):
        assert converter.is_freezing_point(0.009)
        assert not converter.is_freezing_point(0.01)
        assert converter.is_boiling_point(100.001)
        assert not converter.is_boiling_point(None)
        assert not converter.is_freezing_point(None)

    def test_conversion_constants_report_configured_maximum(self):
        converter = TemperatureConverter(TemperatureValidator(max_temperature=750.0))

        assert converter.conversion_constants() == {
            "ABSOLUTE_ZERO_CELSIUS": -273.15,
            "ABSOLUTE_ZERO_FAHRENHEIT": -459.67,
            "MAX_REASONABLE_TEMPERATURE": 750.0,
        }
