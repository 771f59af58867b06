"""
API Routers - FastAPI endpoint definitions.
"""

from temperature_api.presentation.api.temperature import router as temperature_router
from temperature_api.presentation.api.metrics import router as metrics_router

__all__ = [
    "temperature_router",
    "metrics_router",
]
