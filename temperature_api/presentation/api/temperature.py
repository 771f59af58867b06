"""
Temperature API Router - FastAPI endpoints for Celsius/Fahrenheit conversion.

Guidelines:
- Receives handlers via Dependency Injection (Dishka)
- Thin layer: only handles HTTP concerns (request/response)
- Delegates conversion to the Application layer handlers
- InvalidTemperatureError is NOT caught here; the app-level exception
  handler renders it as a 400 error body

Flow:
  HTTP Request → Router → Query → Handler → TemperatureConverter → Validator
                                     ↓
  HTTP Response ← Router ← ConvertTemperatureResult ←
"""

from dataclasses import asdict
from logging import getLogger
from fastapi import APIRouter, Path, status
from fastapi.responses import JSONResponse
from dishka.integrations.fastapi import FromDishka, inject

from temperature_api.application.dto import (
    ApiInfoDTO,
    ConversionRequestDTO,
    ConversionResponseDTO,
    HealthDTO,
)
from temperature_api.application.queries.conversions import (
    ConvertTemperatureHandler,
    ConvertTemperatureQuery,
)
from temperature_api.application.queries.service import (
    CheckHealthHandler,
    GetApiInfoHandler,
)
from temperature_api.config.settings import Config
from temperature_api.domain.value_objects import ConversionDirection

logger = getLogger(__name__)

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"description": "Invalid or out-of-range temperature"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Internal server error"},
}


# ==================== ROUTER ====================

router = APIRouter(prefix=Config.API_PREFIX, tags=["temperature"])


async def _convert(
    handler: ConvertTemperatureHandler,
    value: float | None,
    direction: ConversionDirection,
) -> ConversionResponseDTO:
    outcome = await handler.execute(
        ConvertTemperatureQuery(value=value, direction=direction)
    )
    return ConversionResponseDTO.from_result(outcome.result, outcome.context)


# ==================== CONVERSION ENDPOINTS ====================


@router.get(
    "/celsius-to-fahrenheit/{celsius}",
    response_model=ConversionResponseDTO,
    responses=_ERROR_RESPONSES,
    summary="Convert Celsius to Fahrenheit",
)
@inject
async def celsius_to_fahrenheit_path(
    handler: FromDishka[ConvertTemperatureHandler],
    celsius: float = Path(..., description="Temperature in degrees Celsius", examples=[25.0]),
):
    """Convert using F = (C × 9/5) + 32."""
    return await _convert(handler, celsius, ConversionDirection.CELSIUS_TO_FAHRENHEIT)


@router.get(
    "/fahrenheit-to-celsius/{fahrenheit}",
    response_model=ConversionResponseDTO,
    responses=_ERROR_RESPONSES,
    summary="Convert Fahrenheit to Celsius",
)
@inject
async def fahrenheit_to_celsius_path(
    handler: FromDishka[ConvertTemperatureHandler],
    fahrenheit: float = Path(..., description="Temperature in degrees Fahrenheit", examples=[77.0]),
):
    """Convert using C = (F - 32) × 5/9."""
    return await _convert(handler, fahrenheit, ConversionDirection.FAHRENHEIT_TO_CELSIUS)


@router.post(
    "/celsius-to-fahrenheit",
    response_model=ConversionResponseDTO,
    responses=_ERROR_RESPONSES,
    summary="Convert Celsius to Fahrenheit (JSON body)",
)
@inject
async def celsius_to_fahrenheit_body(
    request: ConversionRequestDTO,
    handler: FromDishka[ConvertTemperatureHandler],
):
    return await _convert(
        handler, request.value, ConversionDirection.CELSIUS_TO_FAHRENHEIT
    )


@router.post(
    "/fahrenheit-to-celsius",
    response_model=ConversionResponseDTO,
    responses=_ERROR_RESPONSES,
    summary="Convert Fahrenheit to Celsius (JSON body)",
)
@inject
async def fahrenheit_to_celsius_body(
    request: ConversionRequestDTO,
    handler: FromDishka[ConvertTemperatureHandler],
):
    return await _convert(
        handler, request.value, ConversionDirection.FAHRENHEIT_TO_CELSIUS
    )


# ==================== SERVICE ENDPOINTS ====================


@router.get(
    "/health",
    response_model=HealthDTO,
    response_model_exclude_none=True,
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": HealthDTO}},
)
@inject
async def health(handler: FromDishka[CheckHealthHandler]):
    """Report API status, verified with a 0°C self-conversion."""
    result = await handler.execute()
    dto = HealthDTO(**asdict(result))
    if not result.healthy:
        logger.warning(f"Health check failed: {result.error}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=dto.model_dump(by_alias=True, exclude_none=True),
        )
    return dto


@router.get("/info", response_model=ApiInfoDTO)
@inject
async def info(handler: FromDishka[GetApiInfoHandler]):
    """Formulas, constants and endpoints of this API."""
    result = await handler.execute()
    return ApiInfoDTO(**asdict(result))
