"""Fixtures for server module unit tests."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from infrastructure.configuration import Settings
from server.server import create_app


@pytest.fixture
def app_settings(locale_settings):
    """Application settings pointing the locale stack at lang_dir."""
    return Settings(PREFIX="test-", locale=locale_settings)


@pytest.fixture
def app(app_settings):
    """Application built around a dedicated dictionary store."""
    return create_app(settings=app_settings)


@pytest.fixture
def client(app):
    """TestClient running the application lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def mock_resolver():
    """Create a mock LocaleResolver."""
    resolver = MagicMock()
    resolver.default_locale = "en-US"
    resolver.negotiate.return_value = "de-DE"
    return resolver
