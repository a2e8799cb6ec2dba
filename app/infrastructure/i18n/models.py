"""Core data structures for the i18n system.

Defines locale tag validation, dictionary file naming, dictionary trees and
the immutable snapshot the store publishes to readers.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from infrastructure.i18n.exceptions import MalformedFileNameError

# language[-REGION], e.g. "en" or "en-US"
LOCALE_PATTERN = re.compile(r"[a-z]{2}(?:-[A-Z]{2})?")
FULL_LOCALE_PATTERN = re.compile(r"[a-z]{2}-[A-Z]{2}")

DEFAULT_SECTION = "default"
KEY_DELIMITER = "."

DictionaryTree = Dict[str, Any]
FrozenTree = Mapping[str, Any]
FlattenedView = Mapping[str, str]


def is_locale_tag(value: Any) -> bool:
    """Check whether value is a language-only or full locale tag."""
    return isinstance(value, str) and LOCALE_PATTERN.fullmatch(value) is not None


def is_full_locale_tag(value: Any) -> bool:
    """Check whether value is a full ``language-REGION`` tag."""
    return isinstance(value, str) and FULL_LOCALE_PATTERN.fullmatch(value) is not None


def language_of(tag: str) -> str:
    """Get the two-letter language part of a locale tag (e.g. "en" from "en-US")."""
    return tag[:2]


@dataclass(frozen=True)
class DictionaryFileName:
    """Parsed dictionary file name of the form ``[section.]name.extension``.

    Attributes:
        section: Nesting key within the locale tree ("default" when omitted).
        name: Locale tag the file contributes to.
        extension: Selects the decoder used for the file contents.
    """

    section: str
    name: str
    extension: str

    @classmethod
    def parse(cls, filename: str) -> "DictionaryFileName":
        """Split a file name into section, name and extension.

        Args:
            filename: Bare file name (e.g. "nested.en-US.json").

        Returns:
            DictionaryFileName instance.

        Raises:
            MalformedFileNameError: If the name has neither two nor three parts.
        """
        parts = filename.split(".")
        if len(parts) == 2:
            parts.insert(0, DEFAULT_SECTION)
        if len(parts) != 3:
            raise MalformedFileNameError(filename)
        section, name, extension = parts
        return cls(section=section, name=name, extension=extension)

    @property
    def is_default_section(self) -> bool:
        return self.section == DEFAULT_SECTION


def freeze(value: Any) -> Any:
    """Deep read-only copy of a decoded value (mappings to proxies, lists to tuples)."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Deep mutable copy of a frozen value."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return value


def flatten(tree: Mapping[str, Any], parent: str = "") -> Dict[str, str]:
    """Flatten a nested dictionary tree into dot-joined keys.

    Nested mappings and lists are walked (list items keyed by index); scalar
    values are converted to strings and ``None`` values are dropped.

    Args:
        tree: Nested mapping to flatten.
        parent: Key prefix for recursive calls.

    Returns:
        Mapping of dot-joined path to string value.
    """
    flat: Dict[str, str] = {}
    for key, value in tree.items():
        path = f"{parent}{KEY_DELIMITER}{key}" if parent else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten(value, path))
        elif isinstance(value, (list, tuple)):
            flat.update(flatten(dict(enumerate(value)), path))
        elif value is not None:
            flat[path] = value if isinstance(value, str) else str(value)
    return flat


@dataclass(frozen=True)
class DictionarySnapshot:
    """Immutable view of every loaded dictionary tree.

    The store swaps whole snapshots on load, reload and extend, so readers
    never observe a partially populated tree. Trees are deep-frozen, so a
    tree and its flattened view cannot drift apart.

    Attributes:
        trees: Locale tag to read-only dictionary tree, in load order.
        flattened: Locale tag to flattened view of its tree.
        loaded_at: Timestamp (ISO 8601) when the snapshot was built.
    """

    trees: Mapping[str, FrozenTree] = field(
        default_factory=lambda: MappingProxyType({})
    )
    flattened: Mapping[str, FlattenedView] = field(
        default_factory=lambda: MappingProxyType({})
    )
    loaded_at: Optional[str] = None

    @classmethod
    def build(
        cls, trees: Mapping[str, DictionaryTree], loaded_at: Optional[str] = None
    ) -> "DictionarySnapshot":
        """Create a snapshot from mutable trees, freezing a copy of each."""
        frozen_trees = MappingProxyType(
            {locale: freeze(tree) for locale, tree in trees.items()}
        )
        flattened = MappingProxyType(
            {
                locale: MappingProxyType(flatten(tree))
                for locale, tree in frozen_trees.items()
            }
        )
        return cls(trees=frozen_trees, flattened=flattened, loaded_at=loaded_at)

    @property
    def locales(self) -> Tuple[str, ...]:
        """Loaded locale tags in load order."""
        return tuple(self.trees)

    def mutable_trees(self) -> Dict[str, DictionaryTree]:
        """Deep mutable copy of the trees, for building the next snapshot."""
        return {locale: thaw(tree) for locale, tree in self.trees.items()}

    def __contains__(self, locale: object) -> bool:
        return locale in self.trees
