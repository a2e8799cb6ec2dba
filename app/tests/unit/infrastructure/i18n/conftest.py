"""Feature-level fixtures for i18n system tests."""

import pytest


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "browser": "de, en-gb;q=0.8, en;q=0.7",
        "integer_weights": "pt;3, de;2, en-US",
        "single": "de-DE",
        "unknown_first": "fr, de",
        "trailing_comma": "de,",
        "malformed": "en_US",
    }


@pytest.fixture
def missing_events():
    """List collecting TranslationMissing diagnostics."""
    return []
