"""Shared fixtures for the test suite.

Builds temporary dictionary directories shaped like a deployed ``lang``
directory:

- en-US.json / default.en-US.json: top-level entries for en-US
- section.en-US.json / nested.en-US.json: sectioned entries
- de-DE.json / pt-BR.json: other locales
- extra/en-US.json: a directory registered later through extend()
"""

import pytest

from infrastructure.configuration import LocaleSettings
from infrastructure.i18n import DictionaryStore, LocaleResolver, Translator
from tests.factories.i18n import LOCALE_DEFAULTS, write_dictionary


@pytest.fixture
def lang_dir(tmp_path):
    """Create a dictionary directory with en-US, de-DE and pt-BR entries."""
    directory = tmp_path / "lang"
    directory.mkdir()
    write_dictionary(directory, "en-US.json", {"val1": "val1", "action": "replaced"})
    write_dictionary(directory, "default.en-US.json", {"val2": "val2"})
    write_dictionary(directory, "section.en-US.json", {"type": "subsection"})
    write_dictionary(directory, "nested.en-US.json", {"action": "improved"})
    write_dictionary(directory, "de-DE.json", {"val1": "Wert1", "action": "ersetzt"})
    write_dictionary(directory, "pt-BR.json", {"action": "substituído"})
    return directory


@pytest.fixture
def extra_dir(tmp_path):
    """Create a second dictionary directory contributing one en-US key."""
    directory = tmp_path / "extra"
    directory.mkdir()
    write_dictionary(directory, "en-US.json", {"extra": "added"})
    return directory


@pytest.fixture
def store(lang_dir):
    """Loaded DictionaryStore over lang_dir."""
    return DictionaryStore(default_locale="en-US", paths=[lang_dir]).load()


@pytest.fixture
def resolver(store):
    """LocaleResolver with the standard locale defaults table."""
    return LocaleResolver(store, locale_defaults=LOCALE_DEFAULTS)


@pytest.fixture
def translator(store, resolver):
    """Translator sharing the loaded store and resolver."""
    return Translator(store, resolver=resolver)


@pytest.fixture
def locale_settings(lang_dir):
    """LocaleSettings pointing at lang_dir."""
    return LocaleSettings(
        DEFAULT_LOCALE="en-US",
        PATHS=[str(lang_dir)],
        LOCALE_DEFAULTS=LOCALE_DEFAULTS,
    )
