"""Conversion DTOs for API request/response."""

from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, ConfigDict, StrictFloat
from pydantic.alias_generators import to_camel
from temperature_api.domain.entities.conversion_result import ConversionResult


class CamelModel(BaseModel):
    """Serializes snake_case fields as camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ConversionRequestDTO(BaseModel):
    """
    Body of POST conversions. A null value is rejected by the domain validator;
    booleans and numeric strings are rejected here.
    """

    value: Optional[StrictFloat] = None


class ConversionResponseDTO(CamelModel):
    original_value: float
    original_unit: str
    converted_value: float
    converted_unit: str
    formula: str
    timestamp: int
    context: str

    @classmethod
    def from_result(cls, result: ConversionResult, context: str) -> ConversionResponseDTO:
        return cls(
            original_value=result.original_value,
            original_unit=result.original_unit.display_name,
            converted_value=result.converted_value,
            converted_unit=result.converted_unit.display_name,
            formula=result.formula,
            timestamp=result.timestamp,
            context=context,
        )
