import pytest

from fastapi.testclient import TestClient
from temperature_api.domain.services import TemperatureConverter, TemperatureValidator
from temperature_api.config.settings import get_config
from temperature_api.fastapi_app import create_fastapi_app


@pytest.fixture()
def app():
    """Create and configure a new FastAPI app instance for each test."""
    return create_fastapi_app(config=get_config("testing"))


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture()
def validator():
    return TemperatureValidator()


@pytest.fixture()
def converter(validator):
    return TemperatureConverter(validator)
