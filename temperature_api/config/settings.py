"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # App settings
    APP_ENV = os.getenv("APP_ENV", "development")
    APP_TITLE = os.getenv("APP_TITLE", "Temperature Conversion API")
    APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
    APP_DESCRIPTION = os.getenv(
        "APP_DESCRIPTION",
        "REST API for converting temperatures between Celsius and Fahrenheit. "
        "Inputs are validated against absolute zero and a configurable upper bound.",
    )
    DEBUG = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes", "on"}

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8080"))

    # API
    API_PREFIX = os.getenv("API_PREFIX", "/api/temperature")

    # Validation bounds (absolute zero is physical, only the upper bound is tunable)
    MAX_REASONABLE_TEMPERATURE = float(
        os.getenv("MAX_REASONABLE_TEMPERATURE", "10000.0")
    )

    # CORS
    CORS_ALLOWED_ORIGINS = os.getenv("CORS_ALLOWED_ORIGINS", "*").split(",")
    CORS_MAX_AGE = int(os.getenv("CORS_MAX_AGE", "3600"))

    # Static web page (conversion form + local history)
    STATIC_DIR = os.getenv(
        "STATIC_DIR",
        os.path.join(os.path.dirname(os.path.dirname(__file__)), "presentation", "static"),
    )

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s",
    )


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class TestingConfig(Config):
    """Testing configuration"""

    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
    LOG_PATH = ""


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
