"""i18n system - locale negotiation and token translation.

Loads translation dictionaries from directories, resolves request locales
through a fallback chain, and replaces ``R.key`` tokens in free text with
HTML-encoded translations.

Main components:
- models: locale tag helpers, DictionaryFileName, DictionarySnapshot
- loader: DictionaryLoader and FileSystemDictionaryLoader
- store: DictionaryStore holding the locale-keyed trees
- resolvers: LocaleResolver with the fallback chain and request negotiation
- translator: Translator performing token substitution
- cache: SubstitutionCache for per-identifier renderings
- formatting: encode_html and format_template
- context: request-scoped locale
"""

from infrastructure.i18n.cache import SubstitutionCache
from infrastructure.i18n.context import (
    get_request_locale,
    reset_request_locale,
    set_request_locale,
)
from infrastructure.i18n.exceptions import (
    ConfigurationError,
    DictionaryDecodeError,
    I18nError,
    InvalidLocaleFormatError,
    LocaleNotLoadedError,
    MalformedFileNameError,
    TranslationMissing,
)
from infrastructure.i18n.factory import (
    create_dictionary_store,
    create_locale_resolver,
    create_translator,
)
from infrastructure.i18n.formatting import encode_html, format_template
from infrastructure.i18n.loader import DictionaryLoader, FileSystemDictionaryLoader
from infrastructure.i18n.models import (
    DictionaryFileName,
    DictionarySnapshot,
    flatten,
    is_full_locale_tag,
    is_locale_tag,
)
from infrastructure.i18n.resolvers import (
    OVERRIDE_SOURCES,
    LanguageCandidate,
    LocaleResolver,
    parse_accept_language,
)
from infrastructure.i18n.store import DictionaryStore
from infrastructure.i18n.translator import Translator

__all__ = [
    "ConfigurationError",
    "DictionaryDecodeError",
    "DictionaryFileName",
    "DictionaryLoader",
    "DictionarySnapshot",
    "DictionaryStore",
    "FileSystemDictionaryLoader",
    "I18nError",
    "InvalidLocaleFormatError",
    "LanguageCandidate",
    "LocaleNotLoadedError",
    "LocaleResolver",
    "MalformedFileNameError",
    "OVERRIDE_SOURCES",
    "SubstitutionCache",
    "TranslationMissing",
    "Translator",
    "create_dictionary_store",
    "create_locale_resolver",
    "create_translator",
    "encode_html",
    "flatten",
    "format_template",
    "get_request_locale",
    "is_full_locale_tag",
    "is_locale_tag",
    "parse_accept_language",
    "reset_request_locale",
    "set_request_locale",
]
