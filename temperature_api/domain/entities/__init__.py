"""Domain entities."""

from temperature_api.domain.entities.conversion_result import ConversionResult

__all__ = ["ConversionResult"]
