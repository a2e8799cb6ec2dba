"""Dictionary store holding the locale-keyed translation trees.

The store is constructed explicitly by the composition root and shared by
reference with request handling code. Mutations build a complete new
snapshot and publish it with a single reference swap, serialized by a
write lock; readers always see a fully populated snapshot.
"""

import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from infrastructure.i18n.exceptions import (
    ConfigurationError,
    InvalidLocaleFormatError,
    LocaleNotLoadedError,
)
from infrastructure.i18n.loader import DictionaryLoader, FileSystemDictionaryLoader
from infrastructure.i18n.models import (
    DictionarySnapshot,
    DictionaryTree,
    FlattenedView,
    FrozenTree,
    is_full_locale_tag,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

PathLike = Union[str, Path]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class DictionaryStore:
    """Locale-keyed store of translation dictionaries.

    Lifecycle is ``DictionaryStore(...) -> load() -> [reload()]*``. Search
    paths are processed in registration order, so later paths win on
    conflicting keys.

    Attributes:
        default_locale: Full locale tag that must be present after loading.
        loader: DictionaryLoader used to read search paths.
    """

    def __init__(
        self,
        default_locale: str = "en-US",
        paths: Optional[Iterable[PathLike]] = None,
        loader: Optional[DictionaryLoader] = None,
    ):
        """Initialize an empty dictionary store.

        Args:
            default_locale: Full locale tag (e.g. "en-US") required after load.
            paths: Initial search paths, loaded by the first ``load()`` call.
            loader: Loader implementation (default: FileSystemDictionaryLoader).

        Raises:
            InvalidLocaleFormatError: If default_locale is not a full locale tag.
        """
        if not is_full_locale_tag(default_locale):
            raise InvalidLocaleFormatError(default_locale)

        self.default_locale = default_locale
        self.loader = loader or FileSystemDictionaryLoader()
        self._paths: List[str] = [str(p) for p in paths or []]
        self._snapshot = DictionarySnapshot()
        self._write_lock = threading.Lock()

    @property
    def paths(self) -> List[str]:
        """Registered search paths in load order."""
        return list(self._paths)

    @property
    def snapshot(self) -> DictionarySnapshot:
        """The currently published snapshot."""
        return self._snapshot

    @property
    def locales(self) -> Tuple[str, ...]:
        """Loaded locale tags in load order."""
        return self._snapshot.locales

    @property
    def is_loaded(self) -> bool:
        """True once a load has completed with the default locale present."""
        return self.default_locale in self._snapshot

    def __contains__(self, locale: object) -> bool:
        return locale in self._snapshot

    def load(self, paths: Optional[Iterable[PathLike]] = None) -> "DictionaryStore":
        """Load all dictionaries from scratch.

        Args:
            paths: Search paths replacing the registered ones. When omitted
                the registered paths are reloaded.

        Returns:
            The store, for chaining.

        Raises:
            MalformedFileNameError: If a dictionary file name is invalid.
            DictionaryDecodeError: If a dictionary file cannot be decoded.
            ConfigurationError: If the default locale is missing after loading.

        On any error the registered paths and the published snapshot are left
        unchanged.
        """
        with self._write_lock:
            search_paths = (
                list(self._paths) if paths is None else [str(p) for p in paths]
            )

            trees: Dict[str, DictionaryTree] = {}
            for path in search_paths:
                self.loader.load_directory(path, trees)

            if self.default_locale not in trees:
                logger.error(
                    "default_locale_missing",
                    default_locale=self.default_locale,
                    paths=search_paths,
                )
                raise ConfigurationError(self.default_locale)

            self._paths = search_paths
            self._snapshot = DictionarySnapshot.build(trees, loaded_at=_now())

        logger.info(
            "dictionaries_loaded",
            locales=list(self.locales),
            path_count=len(self._paths),
        )
        return self

    def reload(self) -> "DictionaryStore":
        """Clear all dictionaries and re-scan every registered path."""
        logger.info("reloading_dictionaries", paths=self.paths)
        return self.load()

    def extend(self, directory: PathLike, *segments: PathLike) -> "DictionaryStore":
        """Register one more search path and load it into the current trees.

        The directory and segments are joined into a single path. A path that
        is already registered is not scanned again until the next reload.

        Args:
            directory: Base directory.
            *segments: Additional path components appended to directory.

        Returns:
            The store, for chaining.

        Raises:
            MalformedFileNameError: If a dictionary file name is invalid.
            DictionaryDecodeError: If a dictionary file cannot be decoded.

        The path is registered only once its files have loaded; a failed
        extend can be retried.
        """
        path = str(Path(directory, *segments))
        with self._write_lock:
            if path in self._paths:
                logger.info("dictionary_path_already_registered", path=path)
                return self

            trees = self._snapshot.mutable_trees()
            self.loader.load_directory(path, trees)

            self._paths = self._paths + [path]
            self._snapshot = DictionarySnapshot.build(trees, loaded_at=_now())

        logger.info("dictionary_path_extended", path=path, locales=list(self.locales))
        return self

    def dictionary(self, locale: str) -> FrozenTree:
        """Get the read-only dictionary tree for a full locale tag.

        Raises:
            LocaleNotLoadedError: If no dictionary is loaded for locale.
        """
        tree = self._snapshot.trees.get(locale)
        if tree is None:
            raise LocaleNotLoadedError(locale)
        return tree

    def flattened(self, locale: str) -> FlattenedView:
        """Get the dot-path keyed view of a locale's dictionary tree.

        Raises:
            LocaleNotLoadedError: If no dictionary is loaded for locale.
        """
        view = self._snapshot.flattened.get(locale)
        if view is None:
            raise LocaleNotLoadedError(locale)
        return view
