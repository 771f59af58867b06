"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- conversion.py → ConversionRequestDTO, ConversionResponseDTO
- api_info.py   → HealthDTO, ApiInfoDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from temperature_api.application.dto.conversion import (
    CamelModel,
    ConversionRequestDTO,
    ConversionResponseDTO,
)
from temperature_api.application.dto.api_info import HealthDTO, ApiInfoDTO

__all__ = [
    "CamelModel",
    "ConversionRequestDTO",
    "ConversionResponseDTO",
    "HealthDTO",
    "ApiInfoDTO",
]
