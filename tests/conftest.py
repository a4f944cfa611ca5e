"""
Pytest configuration and fixtures for API key service tests.
"""
import pytest
from prometheus_client import REGISTRY

from apikey_auth.app import create_app
from apikey_auth.auth import APIKeyHandler


@pytest.fixture
def handler():
    """Default ApiKey handler."""
    return APIKeyHandler()


@pytest.fixture
def app(handler):
    """Flask app wired with the handler fixture."""
    app = create_app(handler=handler)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    with app.test_client() as client:
        yield client


@pytest.fixture
def extraction_count():
    """Read the current value of api_key_extractions_total for an outcome."""
    def _count(result: str) -> float:
        value = REGISTRY.get_sample_value('api_key_extractions_total', {'result': result})
        return value or 0.0
    return _count
