"""Locale negotiation and translation dictionary settings."""

from typing import Dict, List, Optional, Union

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class LocaleSettings(InfrastructureSettings):
    """Locale and dictionary configuration.

    Environment Variables:
        LOCALE_DEFAULT: Full locale tag used when nothing else resolves (default: en-US)
        LOCALE_PARAM_NAME: Request parameter carrying a locale override (default: lang)
        LOCALE_PATHS: JSON list of dictionary directories, or a single directory
        LOCALE_DEFAULTS: JSON object mapping a language code to its preferred full tag
        LANG_DIR: Single dictionary directory overriding LOCALE_PATHS
        LOCALE_TOKEN_PREFIX: Prefix marking translation tokens in text (default: R.)
        LOCALE_ERROR_STATUS_CODE: Status returned for malformed locale input (default: 403)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        paths = settings.locale.search_paths
        default = settings.locale.DEFAULT_LOCALE
        ```
    """

    DEFAULT_LOCALE: str = Field(
        default="en-US",
        alias="LOCALE_DEFAULT",
        pattern=r"^[a-z]{2}-[A-Z]{2}$",
    )
    PARAM_NAME: str = Field(default="lang", alias="LOCALE_PARAM_NAME")
    PATHS: Union[str, List[str]] = Field(
        default_factory=lambda: ["lang"], alias="LOCALE_PATHS"
    )
    LOCALE_DEFAULTS: Dict[str, str] = Field(
        default_factory=lambda: {"en": "en-US", "de": "de-DE", "pt": "pt-BR"},
        alias="LOCALE_DEFAULTS",
    )
    LANG_DIR: Optional[str] = Field(default=None, alias="LANG_DIR")
    TOKEN_PREFIX: str = Field(default="R.", alias="LOCALE_TOKEN_PREFIX", min_length=1)
    ERROR_STATUS_CODE: int = Field(
        default=403, alias="LOCALE_ERROR_STATUS_CODE", ge=400, le=499
    )

    @field_validator("PATHS", mode="after")
    @classmethod
    def validate_paths(cls, v: Union[str, List[str]]) -> List[str]:
        """Wrap a single configured directory into a list."""
        if isinstance(v, str):
            return [v]
        return list(v)

    @property
    def search_paths(self) -> List[str]:
        """Directories to scan for dictionaries, honouring the LANG_DIR override.

        Returns:
            [LANG_DIR] when the override is set, otherwise the configured PATHS.
        """
        if self.LANG_DIR:
            return [self.LANG_DIR]
        return list(self.PATHS)
