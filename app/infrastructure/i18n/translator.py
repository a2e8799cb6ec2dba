"""Token substitution service for localizing free text.

Scans text for ``PREFIX.key.path`` tokens and replaces each with the
HTML-encoded dictionary value for the resolved locale.
"""

import re
from types import MappingProxyType
from typing import Callable, Optional

from infrastructure.i18n.cache import SubstitutionCache
from infrastructure.i18n.context import get_request_locale
from infrastructure.i18n.exceptions import LocaleNotLoadedError, TranslationMissing
from infrastructure.i18n.formatting import encode_html
from infrastructure.i18n.models import DictionarySnapshot, FlattenedView, FrozenTree
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.store import DictionaryStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_TOKEN_PREFIX = "R."

# Token keys run until the first character outside this set
_KEY_PATTERN = re.compile(r"[A-Za-z0-9_.\-]*")

MissingHandler = Callable[[TranslationMissing], None]

_EMPTY_VIEW: FlattenedView = MappingProxyType({})


def log_missing_translation(missing: TranslationMissing) -> None:
    """Default missing-translation handler: log and continue."""
    logger.warning(
        "translation_missing",
        key=missing.key,
        locale=missing.locale,
        identifier=missing.identifier,
    )


class Translator:
    """Service replacing translation tokens in text.

    Attributes:
        store: DictionaryStore providing the flattened dictionaries.
        resolver: LocaleResolver mapping requested locales to loaded ones.
        prefix: Token prefix (default "R.").
        cache: SubstitutionCache for renderings with an identifier.
        missing_handler: Called with a TranslationMissing for every unknown key.
    """

    def __init__(
        self,
        store: DictionaryStore,
        resolver: Optional[LocaleResolver] = None,
        prefix: str = DEFAULT_TOKEN_PREFIX,
        cache: Optional[SubstitutionCache] = None,
        missing_handler: Optional[MissingHandler] = None,
    ):
        """Initialize Translator.

        Args:
            store: DictionaryStore to read dictionaries from.
            resolver: LocaleResolver (default: one built on store without locale defaults).
            prefix: Non-empty token prefix.
            cache: Shared SubstitutionCache (default: a new one).
            missing_handler: Handler for missing translations (default: log a warning).

        Raises:
            ValueError: If prefix is empty.
        """
        if not prefix:
            raise ValueError("Token prefix must not be empty")

        self.store = store
        self.resolver = resolver or LocaleResolver(store)
        self.prefix = prefix
        self.cache = cache if cache is not None else SubstitutionCache()
        self.missing_handler = missing_handler or log_missing_translation

    @property
    def default_locale(self) -> str:
        return self.resolver.default_locale

    def resolve_locale(
        self,
        locale: Optional[str] = None,
        snapshot: Optional[DictionarySnapshot] = None,
    ) -> str:
        """Resolve the target locale, degrading to the default locale.

        Without an explicit locale the current request's locale is used.
        """
        if locale is None:
            locale = get_request_locale()
        return self.resolver.resolve_or_default(locale, snapshot)

    def process(
        self,
        text: str,
        locale: Optional[str] = None,
        identifier: Optional[str] = None,
        force: bool = False,
    ) -> str:
        """Replace all translation tokens in text.

        Args:
            text: Any text containing ``PREFIX.key`` tokens.
            locale: Short or full locale tag (default: current request locale).
            identifier: When given, the result is cached per (identifier, locale).
            force: With an identifier, re-render instead of using the cache.

        Returns:
            Text with known tokens replaced by encoded values; unknown tokens
            are left as they are.
        """
        snapshot = self.store.snapshot
        resolved = self.resolve_locale(locale, snapshot)

        if identifier is not None and not force:
            cached = self.cache.get(identifier, resolved)
            if cached is not None:
                return cached

        if self.prefix not in text:
            return text

        view = snapshot.flattened.get(resolved, _EMPTY_VIEW)
        result = self._substitute(text, view, resolved, identifier)

        if identifier is not None:
            self.cache.set(identifier, resolved, result)
        return result

    def dictionary(self, locale: Optional[str] = None) -> FrozenTree:
        """Get the dictionary tree for a locale (default: current request locale).

        Raises:
            LocaleNotLoadedError: If the resolved locale has no dictionary.
        """
        snapshot = self.store.snapshot
        resolved = self.resolve_locale(locale, snapshot)
        tree = snapshot.trees.get(resolved)
        if tree is None:
            raise LocaleNotLoadedError(resolved)
        return tree

    def _substitute(
        self,
        text: str,
        view: FlattenedView,
        locale: str,
        identifier: Optional[str],
    ) -> str:
        parts = []
        copied = 0
        start = text.find(self.prefix)
        while start != -1:
            parts.append(text[copied:start])

            key_start = start + len(self.prefix)
            key_end = _KEY_PATTERN.match(text, key_start).end()
            key = text[key_start:key_end]

            value = view.get(key)
            if value is not None:
                parts.append(encode_html(value))
            else:
                parts.append(text[start:key_end])
                self.missing_handler(TranslationMissing(key, locale, identifier))

            copied = key_end
            start = text.find(self.prefix, key_end)

        parts.append(text[copied:])
        return "".join(parts)
