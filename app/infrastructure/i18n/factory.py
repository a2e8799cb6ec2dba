"""Factory functions for creating i18n components.

Builds the dictionary store, locale resolver and translator from locale
settings. Loading is always an explicit step performed here or by the
caller, never a side effect of importing a module.
"""

from typing import Iterable, Optional

from infrastructure.configuration import LocaleSettings
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.store import DictionaryStore, PathLike
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def create_dictionary_store(
    settings: Optional[LocaleSettings] = None,
    paths: Optional[Iterable[PathLike]] = None,
    preload: bool = True,
) -> DictionaryStore:
    """Create and optionally load a DictionaryStore.

    Args:
        settings: Locale settings (default: read from the environment).
        paths: Search paths overriding ``settings.search_paths``.
        preload: Whether to load dictionaries immediately.

    Returns:
        DictionaryStore instance.

    Raises:
        ConfigurationError: If preloading leaves the default locale missing.

    Usage:
        # Paths from LOCALE_PATHS, or LANG_DIR when set
        store = create_dictionary_store()

        # Explicit directories, loaded later
        store = create_dictionary_store(paths=["lang", "plugins/lang"], preload=False)
        store.load()
    """
    settings = settings or LocaleSettings()
    search_paths = list(paths) if paths is not None else settings.search_paths
    store = DictionaryStore(default_locale=settings.DEFAULT_LOCALE, paths=search_paths)

    if preload:
        store.load()
        logger.info(
            "dictionary_store_created_with_preload",
            paths=store.paths,
            locale_count=len(store.locales),
        )
    else:
        logger.info("dictionary_store_created_lazy", paths=store.paths)

    return store


def create_locale_resolver(
    store: DictionaryStore,
    settings: Optional[LocaleSettings] = None,
) -> LocaleResolver:
    """Create a LocaleResolver using the configured locale defaults table."""
    settings = settings or LocaleSettings()
    return LocaleResolver(
        store,
        locale_defaults=settings.LOCALE_DEFAULTS,
        default_locale=settings.DEFAULT_LOCALE,
    )


def create_translator(
    settings: Optional[LocaleSettings] = None,
    store: Optional[DictionaryStore] = None,
    resolver: Optional[LocaleResolver] = None,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        settings: Locale settings (default: read from the environment).
        store: Existing store to share (default: a new store from settings).
        resolver: Existing resolver to share (default: built from store and settings).
        preload: Whether a newly created store loads immediately.

    Returns:
        Translator instance.
    """
    settings = settings or LocaleSettings()
    store = store or create_dictionary_store(settings, preload=preload)
    resolver = resolver or create_locale_resolver(store, settings)
    return Translator(store, resolver=resolver, prefix=settings.TOKEN_PREFIX)
