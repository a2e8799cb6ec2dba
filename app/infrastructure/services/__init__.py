"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    DictionaryStoreDep,
    LocaleResolverDep,
    RequestLocaleDep,
    SettingsDep,
    TranslatorDep,
    get_locale,
)
from infrastructure.services.providers import (
    get_dictionary_store,
    get_locale_resolver,
    get_settings,
    get_translator,
)

__all__ = [
    "DictionaryStoreDep",
    "LocaleResolverDep",
    "RequestLocaleDep",
    "SettingsDep",
    "TranslatorDep",
    "get_dictionary_store",
    "get_locale",
    "get_locale_resolver",
    "get_settings",
    "get_translator",
]
