"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import (
    DictionaryStore,
    LocaleResolver,
    Translator,
    create_dictionary_store,
    create_locale_resolver,
)


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.locale.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_dictionary_store() -> DictionaryStore:
    """
    Get application-scoped dictionary store singleton.

    The store is created unloaded; the server lifespan loads it eagerly at
    startup.

    Returns:
        DictionaryStore: Cached store configured from the locale settings.
    """
    return create_dictionary_store(get_settings().locale, preload=False)


@lru_cache
def get_locale_resolver() -> LocaleResolver:
    """
    Get application-scoped locale resolver singleton.

    Returns:
        LocaleResolver: Cached resolver bound to the shared dictionary store.
    """
    return create_locale_resolver(get_dictionary_store(), get_settings().locale)


@lru_cache
def get_translator() -> Translator:
    """
    Get application-scoped translator singleton.

    Returns:
        Translator: Cached translator sharing the store, resolver and cache.

    Usage:
        @router.get("/greeting")
        def greeting(translator: TranslatorDep, locale: RequestLocaleDep):
            return translator.process("R.greeting", locale)
    """
    settings = get_settings()
    return Translator(
        get_dictionary_store(),
        resolver=get_locale_resolver(),
        prefix=settings.locale.TOKEN_PREFIX,
    )
