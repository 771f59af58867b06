"""Temperature Conversion API - Celsius/Fahrenheit conversion over HTTP."""

__version__ = "1.0.0"
