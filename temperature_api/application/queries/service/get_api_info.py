"""
GetApiInfo - Describe formulas, constants and endpoints of the API.

No query parameters needed; everything comes from config and the converter.
"""

from dataclasses import dataclass, field

from temperature_api.application.common.interfaces import Query, QueryHandler
from temperature_api.config.settings import Config
from temperature_api.domain.services import TemperatureConverter
from temperature_api.domain.value_objects import ConversionDirection


@dataclass
class GetApiInfoResult:
    name: str
    description: str
    version: str
    formulas: dict[str, str]
    constants: dict[str, float]
    endpoints: dict[str, str] = field(default_factory=dict)


class GetApiInfoHandler(QueryHandler[GetApiInfoResult]):
    def __init__(self, converter: TemperatureConverter, api_prefix: str = Config.API_PREFIX):
        self._converter = converter
        self._api_prefix = api_prefix

    async def execute(self, query: Query = None) -> GetApiInfoResult:
        prefix = self._api_prefix
        return GetApiInfoResult(
            name=Config.APP_TITLE,
            description="REST API for converting between Celsius and Fahrenheit",
            version=Config.APP_VERSION,
            formulas={
                "celsiusToFahrenheit": ConversionDirection.CELSIUS_TO_FAHRENHEIT.formula,
                "fahrenheitToCelsius": ConversionDirection.FAHRENHEIT_TO_CELSIUS.formula,
            },
            constants=self._converter.conversion_constants(),
            endpoints={
                f"GET {prefix}/celsius-to-fahrenheit/{{value}}": "Convert Celsius to Fahrenheit",
                f"GET {prefix}/fahrenheit-to-celsius/{{value}}": "Convert Fahrenheit to Celsius",
                f"POST {prefix}/celsius-to-fahrenheit": "Convert Celsius to Fahrenheit (JSON)",
                f"POST {prefix}/fahrenheit-to-celsius": "Convert Fahrenheit to Celsius (JSON)",
                f"GET {prefix}/health": "API status",
                f"GET {prefix}/info": "API information",
            },
        )
