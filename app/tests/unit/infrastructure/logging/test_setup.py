"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger context binding
- Test logging suppression in test environment
"""

import logging

import pytest
import structlog

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
    _is_test_environment,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self, mock_settings):
        """configure_logging returns a logger with the standard methods."""
        result = configure_logging(settings=mock_settings)

        assert hasattr(result, "info")
        assert hasattr(result, "debug")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_configure_logging_accepts_overrides(self, mock_settings):
        """configure_logging accepts log level and production overrides."""
        for level in ("DEBUG", "INFO", "WARNING"):
            assert configure_logging(settings=mock_settings, log_level=level) is not None

        assert configure_logging(settings=mock_settings, is_production=True) is not None
        assert configure_logging(log_level="INFO", is_production=False) is not None

    def test_configure_logging_suppresses_in_test_env(self, mock_settings):
        """In test environment, root logger level is set high to suppress output."""
        configure_logging(settings=mock_settings)

        assert logging.getLogger().level >= logging.CRITICAL


@pytest.mark.unit
class TestModuleLoggers:
    """Test suite for get_module_logger."""

    def test_get_module_logger_binds_module_context(self, mock_settings):
        """get_module_logger binds the calling module's component and path."""
        configure_logging(settings=mock_settings)

        logger = get_module_logger()

        context = structlog.get_context(logger)
        assert context["module_path"] == __name__
        assert context["component"] == __name__.split(".")[-1]

    def test_logging_methods_dont_raise(self, mock_settings):
        """Logging methods execute without raising exceptions."""
        configure_logging(settings=mock_settings)

        log = get_module_logger().bind(locale="en-US")

        log.debug("locale_negotiated", source="query")
        log.info("dictionaries_loaded", locales=["en-US"])
        log.warning("translation_missing", key="action")
        log.error("dictionary_reload_failed", error="boom")

    def test_exception_logging(self, mock_settings):
        """Exception logging works correctly."""
        configure_logging(settings=mock_settings)

        logger = structlog.get_logger()

        try:
            raise ValueError("test error")
        except ValueError:
            logger.exception("unexpected_error")
