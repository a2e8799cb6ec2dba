"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.locale import LocaleSettings
from infrastructure.configuration.infrastructure.server import ServerSettings

__all__ = [
    "LocaleSettings",
    "ServerSettings",
]
