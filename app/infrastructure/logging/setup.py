"""structlog configuration for the locale service.

Every module obtains its logger through ``get_module_logger()``; events are
snake_case names with keyword fields:

    logger = get_module_logger()
    logger.info("dictionaries_loaded", locales=["en-US", "de-DE"])

Rendering follows the environment: readable console output in development,
one JSON object per line in production, nothing at all under pytest.
"""

import inspect
import logging
import sys
from typing import TYPE_CHECKING, List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """True when running under pytest."""
    return "pytest" in sys.modules


def _processors(prod_mode: bool) -> List[Processor]:
    processors: List[Processor] = [
        # request context (correlation_id, locale, ...) bound by the middleware
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def _configure_silent() -> BoundLogger:
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
    logging.root.setLevel(SILENT_LEVEL)
    return structlog.stdlib.get_logger()


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional["Settings"] = None,
) -> BoundLogger:
    """Configure structlog and the standard library root logger.

    Args:
        log_level: Level name overriding ``settings.LOG_LEVEL``.
        is_production: JSON output when True, console output when False;
            overrides ``settings.is_production``.
        settings: Settings to read missing values from. Loaded from the
            environment only when an override is missing.

    Returns:
        Logger bound to no context.
    """
    if _is_test_environment():
        return _configure_silent()

    if settings is None and (log_level is None or is_production is None):
        from infrastructure.configuration import Settings

        settings = Settings()

    if is_production is None:
        is_production = settings.is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()

    structlog.configure(
        processors=_processors(is_production),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def _caller_module(depth: int = 2):
    frame = inspect.currentframe()
    for _ in range(depth):
        if frame is None:
            return None
        frame = frame.f_back
    return inspect.getmodule(frame) if frame else None


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Binds ``component`` (last dotted segment) and ``module_path``, e.g.
    ``component="store"``, ``module_path="infrastructure.i18n.store"``.
    """
    module = _caller_module()
    if module is None:
        return logger.bind(component="unknown")
    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
