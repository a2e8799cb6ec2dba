"""Structured logging for the locale service (structlog).

    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("locale_negotiated", locale="de-DE")
"""

from infrastructure.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
)
from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

__all__ = [
    "bind_request_context",
    "clear_request_context",
    "configure_logging",
    "get_correlation_id",
    "get_module_logger",
]
