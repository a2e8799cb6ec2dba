"""Test data factories for i18n system testing.

Provides deterministic builders for:
- dictionary files on disk
- DictionarySnapshot instances
- DictionaryStore instances backed by in-memory trees
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from infrastructure.i18n import DictionaryLoader, DictionarySnapshot, DictionaryStore

LOCALE_DEFAULTS = {"en": "en-US", "de": "de-DE", "pt": "pt-BR"}


def write_dictionary(directory: Path, filename: str, data: Any) -> Path:
    """Write a dictionary file, serialized according to its extension.

    Args:
        directory: Target directory.
        filename: File name (e.g. "nested.en-US.json").
        data: Content; strings are written verbatim.

    Returns:
        Path of the written file.
    """
    path = Path(directory) / filename
    if isinstance(data, str):
        content = data
    elif path.suffix in (".yml", ".yaml"):
        content = yaml.safe_dump(data, allow_unicode=True)
    else:
        content = json.dumps(data, ensure_ascii=False)
    path.write_text(content, encoding="utf-8")
    return path


def make_snapshot(trees: Optional[Dict[str, Dict[str, Any]]] = None) -> DictionarySnapshot:
    """Create a DictionarySnapshot instance.

    Args:
        trees: Locale tag to dictionary tree.

    Returns:
        DictionarySnapshot instance.
    """
    if trees is None:
        trees = {
            "en-US": {"action": "replaced", "nested": {"action": "improved"}},
            "de-DE": {"action": "ersetzt"},
        }
    return DictionarySnapshot.build(trees)


class InMemoryDictionaryLoader(DictionaryLoader):
    """Loader serving trees from a path to {locale: data} mapping."""

    def __init__(self, directories: Dict[str, Dict[str, Dict[str, Any]]]):
        self.directories = directories
        self.loaded_paths = []

    def load_directory(self, path, trees):
        self.loaded_paths.append(str(path))
        contents = self.directories.get(str(path), {})
        for locale, data in contents.items():
            trees.setdefault(locale, {}).update(data)
        return len(contents)


def make_store(
    trees: Optional[Dict[str, Dict[str, Any]]] = None,
    default_locale: str = "en-US",
) -> DictionaryStore:
    """Create a loaded DictionaryStore serving the given trees.

    Locales are loaded in the mapping's iteration order.
    """
    if trees is None:
        trees = {"en-US": {"action": "replaced"}}
    loader = InMemoryDictionaryLoader({"memory": trees})
    return DictionaryStore(
        default_locale=default_locale, paths=["memory"], loader=loader
    ).load()
