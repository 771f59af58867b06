"""
ConversionResult Entity - Outcome of one successful conversion.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from temperature_api.domain.value_objects.temperature_unit import TemperatureUnit
from temperature_api.domain.value_objects.temperature_value import TemperatureValue


@dataclass(frozen=True)
class ConversionResult:
    original_value: float
    original_unit: TemperatureUnit
    converted_value: float
    converted_unit: TemperatureUnit
    formula: str
    created_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @classmethod
    def create(
        cls,
        original: TemperatureValue,
        converted: TemperatureValue,
        formula: str,
    ) -> ConversionResult:
        """Factory method to build a result stamped with the current UTC time."""
        return cls(
            original_value=original.value,
            original_unit=original.unit,
            converted_value=converted.value,
            converted_unit=converted.unit,
            formula=formula,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def original(self) -> TemperatureValue:
        return TemperatureValue(self.original_value, self.original_unit)

    @property
    def converted(self) -> TemperatureValue:
        return TemperatureValue(self.converted_value, self.converted_unit)

    @property
    def celsius_value(self) -> float:
        """Whichever side of the conversion is expressed in Celsius."""
        if self.original_unit is TemperatureUnit.CELSIUS:
            return self.original_value
        return self.converted_value

    @property
    def timestamp(self) -> int:
        """Creation time as epoch milliseconds."""
        return int(self.created_at.timestamp() * 1000)
