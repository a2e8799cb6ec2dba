"""Top-level application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.infrastructure import (
    LocaleSettings,
    ServerSettings,
)


class Settings(BaseSettings):
    """Application settings grouping the configuration sections.

    Sections:
        locale: default locale, locale parameter, dictionary search paths,
            token prefix and the malformed-locale status code
        server: CORS origins

    Environment Variables:
        PREFIX: Deployment prefix; empty in production
        LOG_LEVEL: Log level name (default: INFO)
        GIT_SHA: Commit reported by GET /version

    Example:
        ```python
        settings = Settings(locale=LocaleSettings(LANG_DIR="/srv/lang"))
        settings.locale.search_paths  # ["/srv/lang"]
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    locale: LocaleSettings
    server: ServerSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    def __init__(self, **kwargs):
        # Sections read their own environment variables unless passed in
        kwargs.setdefault("locale", LocaleSettings())
        kwargs.setdefault("server", ServerSettings())
        super().__init__(**kwargs)

    @property
    def is_production(self) -> bool:
        """True when no deployment PREFIX is set."""
        return not self.PREFIX
