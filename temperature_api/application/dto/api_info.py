"""Health and info DTOs."""

from typing import Optional
from pydantic import BaseModel
from temperature_api.application.dto.conversion import CamelModel


class HealthDTO(CamelModel):
    status: str
    service: str
    version: str
    timestamp: int
    service_check: str
    error: Optional[str] = None


class ApiInfoDTO(BaseModel):
    name: str
    description: str
    version: str
    formulas: dict[str, str]
    constants: dict[str, float]
    endpoints: dict[str, str]
