"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    LOCALE_DEFAULTS,
    InMemoryDictionaryLoader,
    make_snapshot,
    make_store,
    write_dictionary,
)

__all__ = [
    "LOCALE_DEFAULTS",
    "InMemoryDictionaryLoader",
    "make_snapshot",
    "make_store",
    "write_dictionary",
]
