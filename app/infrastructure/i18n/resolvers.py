"""Locale resolution logic for determining the request's language.

Maps arbitrary locale tags to loaded dictionaries through a fallback chain
and negotiates a locale from the Accept-Language header plus overriding
request parameters.
"""

import re
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from infrastructure.i18n.exceptions import InvalidLocaleFormatError
from infrastructure.i18n.models import DictionarySnapshot, is_locale_tag, language_of
from infrastructure.i18n.store import DictionaryStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Request sources able to override the header-derived locale, weakest first
OVERRIDE_SOURCES: Tuple[str, ...] = ("params", "query", "session", "cookie", "body")

_PRIORITY_PATTERN = re.compile(r"\s*([+-]?\d+)")

Overrides = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


@dataclass(frozen=True)
class LanguageCandidate:
    """One entry of an Accept-Language header.

    Attributes:
        code: Language range as sent by the client (e.g. "de", "en-US").
        priority: Integer weight following the ";" (1 when absent or not an integer).
    """

    code: str
    priority: int = 1


def _parse_priority(raw: str) -> int:
    match = _PRIORITY_PATTERN.match(raw)
    if match:
        value = int(match.group(1))
        if value:
            return value
    return 1


def parse_accept_language(header: Optional[str]) -> List[LanguageCandidate]:
    """Parse an Accept-Language header into candidates ordered for matching.

    Candidates are sorted by ascending priority; ties keep header order.
    A "q=0.8" style parameter is not an integer weight and counts as 1, so
    "de, en-gb;q=0.8, en;q=0.7" is tried in header order. Empty entries
    (e.g. from a stray comma) are kept with an empty code, which fails
    locale validation when it is reached.

    Args:
        header: Accept-Language header value.

    Returns:
        Candidates in the order they should be tried.
    """
    if not header:
        return []

    candidates = []
    for part in header.split(","):
        pieces = part.strip().split(";")
        code = pieces[0].strip()
        priority = _parse_priority(pieces[1]) if len(pieces) > 1 else 1
        candidates.append(LanguageCandidate(code=code, priority=priority))

    return sorted(candidates, key=lambda c: c.priority)


class LocaleResolver:
    """Resolves locale tags against the loaded dictionaries.

    Fallback chain for a tag:
    1. Exact match against loaded locales
    2. The locale defaults table entry for the tag's language, if loaded
    3. The first loaded locale (in load order) sharing the tag's language
    4. Not found

    Attributes:
        store: DictionaryStore consulted for available locales.
        locale_defaults: Language code to preferred full locale tag.
        default_locale: Locale negotiation starts from.
    """

    def __init__(
        self,
        store: DictionaryStore,
        locale_defaults: Optional[Mapping[str, str]] = None,
        default_locale: Optional[str] = None,
    ):
        """Initialize locale resolver.

        Args:
            store: DictionaryStore to resolve against.
            locale_defaults: Language code to preferred full tag (e.g. {"en": "en-US"}).
            default_locale: Fallback locale (default: the store's default locale).
        """
        self.store = store
        self.locale_defaults = dict(locale_defaults or {})
        self.default_locale = self.validate(default_locale or store.default_locale)
        self.log = logger.bind(default_locale=self.default_locale)

    @staticmethod
    def validate(tag: Any) -> str:
        """Check that tag is a ``language[-REGION]`` locale tag.

        Args:
            tag: Candidate locale tag.

        Returns:
            The tag unchanged.

        Raises:
            InvalidLocaleFormatError: If tag does not match the pattern.
        """
        if not is_locale_tag(tag):
            raise InvalidLocaleFormatError(tag)
        return tag

    def resolve(
        self, tag: Any, snapshot: Optional[DictionarySnapshot] = None
    ) -> Optional[str]:
        """Map a locale tag to a loaded locale.

        Args:
            tag: Language-only or full locale tag (e.g. "en" or "en-GB").
            snapshot: Snapshot to resolve against (default: the store's current one).

        Returns:
            Loaded full locale tag, or None if nothing matches.

        Raises:
            InvalidLocaleFormatError: If tag is malformed.
        """
        self.validate(tag)
        if snapshot is None:
            snapshot = self.store.snapshot
        if tag in snapshot:
            return tag

        language = language_of(tag)
        preferred = self.locale_defaults.get(language)
        if preferred and preferred in snapshot:
            return preferred

        for available in snapshot.locales:
            if available.startswith(language):
                return available

        return None

    def resolve_or_default(
        self, tag: Any, snapshot: Optional[DictionarySnapshot] = None
    ) -> str:
        """Resolve a locale tag, degrading to the default locale.

        Unknown and malformed tags both yield the default locale.
        """
        if tag is None:
            return self.default_locale
        try:
            resolved = self.resolve(tag, snapshot)
        except InvalidLocaleFormatError:
            self.log.warning("invalid_locale_degraded_to_default", locale=tag)
            return self.default_locale
        return resolved or self.default_locale

    def negotiate(
        self,
        accept_language: Optional[str] = None,
        overrides: Optional[Overrides] = None,
    ) -> str:
        """Negotiate the locale for a request.

        Starts from the default locale. The first Accept-Language candidate
        that resolves replaces it. Then every non-empty override, in
        OVERRIDE_SOURCES order, replaces the current locale when it resolves.

        Args:
            accept_language: Accept-Language header value.
            overrides: (source, raw value) pairs or a source to value mapping;
                sources must be listed in OVERRIDE_SOURCES.

        Returns:
            Resolved full locale tag.

        Raises:
            InvalidLocaleFormatError: If any consulted candidate is malformed.
            ValueError: If an override source is unknown.
        """
        locale = self.default_locale
        snapshot = self.store.snapshot

        for candidate in parse_accept_language(accept_language):
            resolved = self.resolve(candidate.code, snapshot)
            if resolved:
                locale = resolved
                break

        for source, raw in self._ordered_overrides(overrides):
            if not raw:
                continue
            resolved = self.resolve(raw, snapshot)
            if resolved:
                locale = resolved
            else:
                self.log.debug("unresolved_locale_override", source=source, locale=raw)

        self.log.debug("locale_negotiated", locale=locale)
        return locale

    @staticmethod
    def _ordered_overrides(overrides: Optional[Overrides]) -> List[Tuple[str, Any]]:
        if not overrides:
            return []
        items = list(overrides.items() if isinstance(overrides, Mapping) else overrides)
        for source, _ in items:
            if source not in OVERRIDE_SOURCES:
                raise ValueError(f"Unknown locale override source: {source}")
        return sorted(items, key=lambda item: OVERRIDE_SOURCES.index(item[0]))
