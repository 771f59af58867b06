"""
FastAPI Application Factory.
Creates and configures the FastAPI application with routers, middleware,
exception handlers and DI.
"""

import math
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from http import HTTPStatus
from logging import getLogger
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from dishka.integrations.fastapi import setup_dishka

from temperature_api.config.logging_config import setup_logging
from temperature_api.config.settings import get_config
from temperature_api.domain.exceptions import (
    InvalidTemperatureError,
    TemperatureConversionError,
)
from temperature_api.observability import MetricsErrorType, increment_error
from temperature_api.presentation.api import metrics_router, temperature_router
from temperature_api.presentation.middleware import (
    CORRELATION_ID_HEADER,
    CorrelationIdMiddleware,
    MetricsMiddleware,
)
from temperature_api.setup.ioc.container import create_container

logger = getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: container is already attached by setup_dishka
    - Shutdown: close the DI container
    """
    logger.info("FastAPI application started. DI container initialized.")
    yield
    await app.state.dishka_container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def _json_number(value: Optional[float]) -> Any:
    """JSON has no NaN/Infinity literals; render those as strings."""
    if value is None or math.isfinite(value):
        return value
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def _error_body(status_code: int, message: str, request: Request, **extra: Any) -> dict:
    body = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status_code,
        "error": HTTPStatus(status_code).phrase,
        "message": message,
        "path": request.url.path,
    }
    body.update(extra)
    return body


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidTemperatureError)
    async def invalid_temperature_handler(request: Request, exc: InvalidTemperatureError):
        extra = {
            "errorCode": exc.error_code,
            "errorKind": exc.kind.value,
            "invalidValue": _json_number(exc.invalid_value),
            "unit": exc.unit.symbol if exc.unit else None,
        }
        if exc.max_limit is not None:
            extra["maxLimit"] = exc.max_limit
        return JSONResponse(
            status_code=400,
            content=_error_body(400, exc.message, request, **extra),
        )

    @app.exception_handler(TemperatureConversionError)
    async def conversion_error_handler(request: Request, exc: TemperatureConversionError):
        increment_error(MetricsErrorType.CONVERSION_FAILED)
        extra = {"errorCode": exc.error_code}
        if exc.error_args:
            extra["errorArgs"] = [str(arg) for arg in exc.error_args]
        return JSONResponse(
            status_code=400,
            content=_error_body(400, exc.message, request, **extra),
        )

    # Validation error handler - request body / path parameters that do not parse
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        increment_error(MetricsErrorType.VALIDATION_FAILED)
        validation_errors = {
            ".".join(str(part) for part in error.get("loc", ())): error.get("msg", "")
            for error in exc.errors()
        }
        logger.info(f"Request validation failed: {validation_errors}")
        return JSONResponse(
            status_code=400,
            content=_error_body(
                400,
                "Invalid input data",
                request,
                errorCode="VALIDATION_ERROR",
                validationErrors=validation_errors,
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.status_code, str(exc.detail), request),
            headers=getattr(exc, "headers", None),
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        increment_error(MetricsErrorType.INTERNAL)
        logger.exception(f"Unhandled error on {request.url.path}: {type(exc).__name__}")
        return JSONResponse(
            status_code=500,
            content=_error_body(
                500,
                "Internal server error",
                request,
                errorCode="INTERNAL_SERVER_ERROR",
                technicalMessage=str(exc),
            ),
        )


def create_fastapi_app(
    max_temperature: Optional[float] = None,
    serve_static: bool = True,
    config=None,
) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        max_temperature: Upper validation bound handed to the validator
            (defaults to config.MAX_REASONABLE_TEMPERATURE)
        serve_static: Mount the browser page at "/"
        config: Settings class; resolved from APP_ENV when omitted

    Returns:
        FastAPI application instance
    """
    if config is None:
        config = get_config()
    if max_temperature is None:
        max_temperature = config.MAX_REASONABLE_TEMPERATURE

    setup_logging(config.LOG_LEVEL, config.LOG_PATH or None)

    app = FastAPI(
        title=config.APP_TITLE,
        description=config.APP_DESCRIPTION,
        version=config.APP_VERSION,
        lifespan=lifespan,
    )

    # Dishka must be set up before the app starts (it adds middleware)
    setup_dishka(create_container(max_temperature=max_temperature), app)

    app.add_middleware(MetricsMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    # CORS middleware (outermost, so preflight never reaches the routes)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOWED_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS", "HEAD"],
        allow_headers=["*"],
        expose_headers=[CORRELATION_ID_HEADER],
        max_age=config.CORS_MAX_AGE,
    )

    _register_exception_handlers(app)

    # Liveness probe (the API-level /health also exercises the converter)
    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(temperature_router)
    app.include_router(metrics_router)

    # Mounted last so API routes take precedence over the catch-all mount
    if serve_static:
        app.mount(
            "/",
            StaticFiles(directory=config.STATIC_DIR, html=True),
            name="static",
        )

    return app


# Create the app instance
app = create_fastapi_app()
