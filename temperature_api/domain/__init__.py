"""
DOMAIN LAYER - Temperature conversion rules

This layer contains:
- Value Objects: Immutable types (TemperatureUnit, TemperatureValue)
- Entities: ConversionResult
- Services: Pure domain logic (TemperatureValidator, TemperatureConverter)
- Exceptions: Domain-specific errors (InvalidTemperatureError)
- constants.py: Physical bounds, precision, formula strings

RULES:
1. NO framework imports (no FastAPI, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
