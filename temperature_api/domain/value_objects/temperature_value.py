"""
TemperatureValue Value Object - A number tagged with its scale.
"""

from dataclasses import dataclass
from temperature_api.domain.value_objects.temperature_unit import TemperatureUnit


@dataclass(frozen=True)
class TemperatureValue:
    value: float
    unit: TemperatureUnit

    def __str__(self) -> str:
        return f"{self.value:.2f}{self.unit.symbol}"
