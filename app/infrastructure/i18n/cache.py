"""Memoization of rendered text per (identifier, locale)."""

import threading
from typing import Dict, Optional


class SubstitutionCache:
    """Cache of rendered text keyed by caller identifier and locale.

    Entries never expire; callers refresh them with ``force`` on the
    translator or drop them through ``invalidate``/``clear``. Writes are
    serialized, reads are lock-free dictionary lookups.
    """

    def __init__(self):
        self._entries: Dict[str, Dict[str, str]] = {}
        self._lock = threading.Lock()

    def get(self, identifier: str, locale: str) -> Optional[str]:
        """Get the cached rendering for identifier in locale, if any."""
        renderings = self._entries.get(identifier)
        if renderings is None:
            return None
        return renderings.get(locale)

    def set(self, identifier: str, locale: str, text: str) -> None:
        """Store the rendering for identifier in locale."""
        with self._lock:
            renderings = self._entries.get(identifier)
            if renderings is None:
                renderings = self._entries[identifier] = {}
            renderings[locale] = text

    def invalidate(self, identifier: str, locale: Optional[str] = None) -> None:
        """Drop one locale's rendering, or every rendering, for identifier."""
        with self._lock:
            if locale is None:
                self._entries.pop(identifier, None)
                return
            renderings = self._entries.get(identifier)
            if renderings is not None:
                renderings.pop(locale, None)

    def clear(self) -> None:
        with self._lock:
            self._entries = {}

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        identifier, locale = key
        return self.get(identifier, locale) is not None

    def __len__(self) -> int:
        return sum(len(renderings) for renderings in list(self._entries.values()))
