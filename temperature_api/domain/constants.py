"""
Domain constants - physical bounds and precision used by the converter.

These are process-wide and never mutated. The upper bound can be overridden
per validator instance (see Config.MAX_REASONABLE_TEMPERATURE).
"""

from decimal import ROUND_HALF_UP

ABSOLUTE_ZERO_CELSIUS = -273.15
ABSOLUTE_ZERO_FAHRENHEIT = -459.67
MAX_REASONABLE_TEMPERATURE = 10000.0

# Results are rounded to 2 decimals, intermediate division keeps 4 more
DECIMAL_PRECISION = 2
GUARD_DIGITS = 4
ROUNDING_MODE = ROUND_HALF_UP

CELSIUS_TO_FAHRENHEIT_FORMULA = "F = (C × 9/5) + 32"
FAHRENHEIT_TO_CELSIUS_FORMULA = "C = (F - 32) × 5/9"

# Tolerances for the context helpers (degrees Celsius)
FIXED_POINT_TOLERANCE = 0.01
BODY_TEMPERATURE_CELSIUS = 37.0
BODY_TEMPERATURE_TOLERANCE = 0.5
ROOM_TEMPERATURE_RANGE = (20.0, 25.0)
