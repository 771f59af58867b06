"""
TemperatureConversionError - Base class for conversion failures.
Maps to: HTTP 400 Bad Request
"""

from typing import Any


class TemperatureConversionError(Exception):
    """Raised when a temperature cannot be converted."""

    DEFAULT_ERROR_CODE = "TEMPERATURE_CONVERSION_ERROR"

    def __init__(
        self,
        message: str,
        error_code: str = DEFAULT_ERROR_CODE,
        *error_args: Any,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.error_args = tuple(error_args)
