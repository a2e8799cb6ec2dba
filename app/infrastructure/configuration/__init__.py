"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    Settings: Main settings class
    LocaleSettings: Locale and dictionary settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()
    paths = settings.locale.search_paths
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure.locale import LocaleSettings

__all__ = ["Settings", "LocaleSettings"]
