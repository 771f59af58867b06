"""
Dishka DI Container Setup.

Guidelines:
- Registers the domain services and the query handlers
- Manages lifecycle (singleton, request-scoped)

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)

Flow:
  Container → provides → TemperatureConverter → to → ConvertTemperatureHandler
                                ↓
                     uses TemperatureValidator (configured upper bound)
"""

from dishka import Provider, Scope, make_async_container, provide, AsyncContainer
from temperature_api.application.queries.conversions import ConvertTemperatureHandler
from temperature_api.application.queries.service import (
    CheckHealthHandler,
    GetApiInfoHandler,
)
from temperature_api.config.settings import Config
from temperature_api.domain.services import TemperatureConverter, TemperatureValidator


class AppProvider(Provider):
    """
    Application dependency provider.

    The validator and converter are stateless, so one instance of each is
    shared by all requests. Handlers are created per request.
    """

    def __init__(self, max_temperature: float = Config.MAX_REASONABLE_TEMPERATURE):
        super().__init__()
        self._max_temperature = max_temperature

    # ==================== DOMAIN SERVICES ====================

    @provide(scope=Scope.APP)
    def get_validator(self) -> TemperatureValidator:
        return TemperatureValidator(max_temperature=self._max_temperature)

    @provide(scope=Scope.APP)
    def get_converter(self, validator: TemperatureValidator) -> TemperatureConverter:
        return TemperatureConverter(validator)

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_convert_temperature_handler(
        self, converter: TemperatureConverter
    ) -> ConvertTemperatureHandler:
        return ConvertTemperatureHandler(converter)

    @provide(scope=Scope.REQUEST)
    def get_api_info_handler(self, converter: TemperatureConverter) -> GetApiInfoHandler:
        return GetApiInfoHandler(converter, api_prefix=Config.API_PREFIX)

    @provide(scope=Scope.REQUEST)
    def get_check_health_handler(
        self, converter: TemperatureConverter
    ) -> CheckHealthHandler:
        return CheckHealthHandler(converter)


def create_container(
    max_temperature: float = Config.MAX_REASONABLE_TEMPERATURE,
) -> AsyncContainer:
    """
    Create and configure the DI container.

    Called once per application instance by create_fastapi_app().
    """
    return make_async_container(AppProvider(max_temperature=max_temperature))
