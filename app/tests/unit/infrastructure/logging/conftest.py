"""Fixtures for infrastructure.logging tests."""

from unittest.mock import Mock

import pytest

from infrastructure.configuration import Settings
from infrastructure.logging import clear_request_context


@pytest.fixture
def mock_settings():
    """Settings stand-in for a development deployment."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "DEBUG"
    settings.is_production = False
    return settings


@pytest.fixture(autouse=True)
def clean_log_context():
    """Run every test with an empty structlog context."""
    clear_request_context()
    yield
    clear_request_context()
