"""
Base interfaces for CQRS pattern.

Conversions never write anything, so every use case is a Query.

Usage:
    @dataclass(frozen=True)
    class ConvertTemperatureQuery(Query[ConversionResult]):
        value: Optional[float]
        direction: ConversionDirection

    class ConvertTemperatureHandler(QueryHandler[ConversionResult]):
        def __init__(self, converter: TemperatureConverter):
            self._converter = converter

        async def execute(self, query: ConvertTemperatureQuery) -> ConversionResult:
            return self._converter.convert(query.value, query.direction)
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")


class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
