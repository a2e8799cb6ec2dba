"""Server infrastructure settings."""

from typing import List

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        CORS_ALLOW_ORIGINS: JSON list of allowed origins outside production

    Example:
        ```python
        from infrastructure.services import get_settings

        origins = get_settings().server.CORS_ALLOW_ORIGINS
        ```
    """

    CORS_ALLOW_ORIGINS: List[str] = Field(
        default_factory=lambda: ["http://localhost:8000", "http://127.0.0.1:8000"],
        alias="CORS_ALLOW_ORIGINS",
    )
