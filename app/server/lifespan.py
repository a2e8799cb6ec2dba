from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.i18n import DictionaryStore
from infrastructure.logging.setup import configure_logging

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(settings=settings)


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    logger.info(
        "configuration_initialized",
        default_locale=settings.locale.DEFAULT_LOCALE,
        param_name=settings.locale.PARAM_NAME,
        search_paths=settings.locale.search_paths,
        log_level=settings.LOG_LEVEL,
    )


def build_lifespan(settings: "Settings", store: DictionaryStore):
    """Create the application lifespan loading the dictionary store at startup.

    A store that fails to load (malformed file names, undecodable files or a
    missing default locale) aborts startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger = _get_logger(settings)
        _list_configs(settings, logger)

        if not store.is_loaded:
            store.load()
        logger.info("dictionary_store_ready", locales=list(store.locales))
        app.state.dictionary_store = store

        yield

        logger.info("application_shutdown")

    return lifespan
