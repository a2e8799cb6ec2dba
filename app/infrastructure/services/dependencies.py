"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends, Request

from infrastructure.configuration import Settings
from infrastructure.i18n import DictionaryStore, LocaleResolver, Translator
from infrastructure.services.providers import (
    get_dictionary_store,
    get_locale_resolver,
    get_settings,
    get_translator,
)


def get_locale(
    request: Request,
    resolver: Annotated[LocaleResolver, Depends(get_locale_resolver)],
) -> str:
    """Locale negotiated for the request by the locale middleware.

    Falls back to the default locale when the middleware is not installed.
    """
    return getattr(request.state, "locale", None) or resolver.default_locale


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Shared dictionary store
DictionaryStoreDep = Annotated[DictionaryStore, Depends(get_dictionary_store)]

# Locale resolver bound to the shared store
LocaleResolverDep = Annotated[LocaleResolver, Depends(get_locale_resolver)]

# Token translator
TranslatorDep = Annotated[Translator, Depends(get_translator)]

# Locale negotiated for the current request
RequestLocaleDep = Annotated[str, Depends(get_locale)]

__all__ = [
    "SettingsDep",
    "DictionaryStoreDep",
    "LocaleResolverDep",
    "TranslatorDep",
    "RequestLocaleDep",
    "get_locale",
]
