"""
CheckHealth - Verify the converter works by converting 0°C.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from logging import getLogger
from typing import Optional

from temperature_api.application.common.interfaces import Query, QueryHandler
from temperature_api.config.settings import Config
from temperature_api.domain.exceptions import TemperatureConversionError
from temperature_api.domain.services import TemperatureConverter

logger = getLogger(__name__)


@dataclass
class CheckHealthResult:
    status: str
    service: str
    version: str
    timestamp: int
    service_check: str
    error: Optional[str] = None

    @property
    def healthy(self) -> bool:
        return self.status == "UP"


class CheckHealthHandler(QueryHandler[CheckHealthResult]):
    def __init__(self, converter: TemperatureConverter):
        self._converter = converter

    async def execute(self, query: Query = None) -> CheckHealthResult:
        timestamp = int(datetime.now(timezone.utc).timestamp() * 1000)
        try:
            self._converter.celsius_to_fahrenheit(0.0)
        except (TemperatureConversionError, ArithmeticError) as e:
            logger.error(f"Health check conversion failed: {e}")
            return CheckHealthResult(
                status="DOWN",
                service=Config.APP_TITLE,
                version=Config.APP_VERSION,
                timestamp=timestamp,
                service_check="ERROR",
                error=str(e),
            )

        return CheckHealthResult(
            status="UP",
            service=Config.APP_TITLE,
            version=Config.APP_VERSION,
            timestamp=timestamp,
            service_check="OK",
        )
