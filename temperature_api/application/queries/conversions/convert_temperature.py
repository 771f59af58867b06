"""
ConvertTemperature Query - Convert one value in one direction.

The handler returns the domain result together with its context label;
InvalidTemperatureError propagates to the presentation layer untouched.
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from temperature_api.application.common.interfaces import Query, QueryHandler
from temperature_api.domain.entities.conversion_result import ConversionResult
from temperature_api.domain.exceptions import InvalidTemperatureError
from temperature_api.domain.services import TemperatureConverter
from temperature_api.domain.value_objects import ConversionDirection
from temperature_api.observability import (
    increment_conversion,
    increment_invalid_temperature,
)

logger = getLogger(__name__)


@dataclass
class ConvertTemperatureResult:
    result: ConversionResult
    context: str


@dataclass(frozen=True)
class ConvertTemperatureQuery(Query[ConvertTemperatureResult]):
    value: Optional[float]
    direction: ConversionDirection


class ConvertTemperatureHandler(QueryHandler[ConvertTemperatureResult]):
    def __init__(self, converter: TemperatureConverter):
        self._converter = converter

    async def execute(self, query: ConvertTemperatureQuery) -> ConvertTemperatureResult:
        try:
            result = self._converter.convert(query.value, query.direction)
        except InvalidTemperatureError as e:
            logger.info(
                f"Rejected {query.direction.value} input {query.value!r}: {e.kind.value}"
            )
            increment_invalid_temperature(e.kind.value)
            raise

        increment_conversion(query.direction.value)
        return ConvertTemperatureResult(
            result=result,
            context=self._converter.context_label(result.celsius_value),
        )
