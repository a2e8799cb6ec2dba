"""Custom exceptions for the i18n system.

Malformed input and load-time failures surface to the caller. Missing
translations are reported through ``TranslationMissing`` diagnostics and
never raised by the substitution engine.
"""

from typing import Optional


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            store.load(paths)
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class InvalidLocaleFormatError(I18nError, ValueError):
    """Raised when a locale tag does not match ``language[-REGION]``.

    Example:
        >>> resolver.validate("en_US")
        Traceback (most recent call last):
        ...
        InvalidLocaleFormatError: The given locale is not in a supported format: 'en_US'
    """

    def __init__(self, tag: object):
        self.tag = tag
        super().__init__(f"The given locale is not in a supported format: {tag!r}")


class MalformedFileNameError(I18nError):
    """Raised when a dictionary file name is not ``[section.]name.extension``."""

    def __init__(self, filename: str, directory: Optional[str] = None):
        self.filename = filename
        self.directory = directory
        super().__init__(f"An invalid language file has been detected: {filename}")


class DictionaryDecodeError(I18nError):
    """Raised when a dictionary file cannot be decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to decode dictionary file {path}: {reason}")


class ConfigurationError(I18nError):
    """Raised when the default locale is missing after loading dictionaries."""

    def __init__(self, default_locale: str):
        self.default_locale = default_locale
        super().__init__(
            f"The language module has been loaded without a default language: {default_locale}"
        )


class LocaleNotLoadedError(I18nError, KeyError):
    """Raised when a dictionary is requested for a locale that is not loaded."""

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"No dictionary loaded for locale {locale}")

    def __str__(self) -> str:
        return f"No dictionary loaded for locale {self.locale}"


class TranslationMissing(I18nError):
    """Diagnostic for a token without a dictionary entry.

    Passed to the translator's missing-translation handler; the token is
    left verbatim in the output.
    """

    def __init__(self, key: str, locale: str, identifier: Optional[str] = None):
        self.key = key
        self.locale = locale
        self.identifier = identifier
        super().__init__(f"Translation missing for key {key} in {locale}")
