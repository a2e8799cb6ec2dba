from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.router import api_router
from infrastructure.configuration import Settings
from infrastructure.i18n import DictionaryStore, Translator, create_locale_resolver
from infrastructure.logging import get_module_logger
from infrastructure.services.providers import (
    get_dictionary_store,
    get_locale_resolver,
    get_settings,
    get_translator,
)
from server.lifespan import build_lifespan
from server.locale_middleware import ErrorHandler, LocaleMiddleware

logger = get_module_logger()


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[DictionaryStore] = None,
    error_handler: Optional[ErrorHandler] = None,
) -> FastAPI:
    """Build the FastAPI application.

    Without arguments the application uses the cached providers. Passing
    settings or a store builds a dedicated resolver and translator and
    overrides the route dependencies so every component shares that store.
    The store is loaded by the lifespan.

    Args:
        settings: Application settings.
        store: Dictionary store to share.
        error_handler: Replacement for the malformed locale error response.

    Returns:
        Configured FastAPI application.
    """
    overrides = {}
    if settings is None and store is None:
        settings = get_settings()
        store = get_dictionary_store()
        resolver = get_locale_resolver()
    else:
        settings = settings or get_settings()
        store = store or DictionaryStore(
            default_locale=settings.locale.DEFAULT_LOCALE,
            paths=settings.locale.search_paths,
        )
        resolver = create_locale_resolver(store, settings.locale)
        translator = Translator(
            store, resolver=resolver, prefix=settings.locale.TOKEN_PREFIX
        )
        overrides = {
            get_settings: lambda: settings,
            get_dictionary_store: lambda: store,
            get_locale_resolver: lambda: resolver,
            get_translator: lambda: translator,
        }

    app = FastAPI(lifespan=build_lifespan(settings, store))
    app.dependency_overrides.update(overrides)

    allow_origins = (
        ["*"] if settings.is_production else settings.server.CORS_ALLOW_ORIGINS
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        LocaleMiddleware,
        resolver=resolver,
        param_name=settings.locale.PARAM_NAME,
        error_handler=error_handler,
        error_status_code=settings.locale.ERROR_STATUS_CODE,
    )

    app.include_router(api_router)
    logger.info("application_created", default_locale=resolver.default_locale)
    return app
