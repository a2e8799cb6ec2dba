"""
Unit tests for dependency injection providers.

Tests cover:
- Provider caching behavior
- Shared store between resolver and translator
- Dependency aliases with FastAPI dependency injection
- Dependency override pattern for testing
"""

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from infrastructure.configuration import Settings
from infrastructure.i18n import DictionaryStore, LocaleResolver, Translator
from infrastructure.services.dependencies import (
    DictionaryStoreDep,
    RequestLocaleDep,
    SettingsDep,
    TranslatorDep,
)
from infrastructure.services.providers import (
    get_dictionary_store,
    get_locale_resolver,
    get_settings,
    get_translator,
)

PROVIDERS = (get_settings, get_dictionary_store, get_locale_resolver, get_translator)


@pytest.fixture(autouse=True)
def cleanup_provider_cache():
    """Clear provider caches around each test."""
    for provider in PROVIDERS:
        provider.cache_clear()
    yield
    for provider in PROVIDERS:
        provider.cache_clear()


@pytest.fixture
def env_lang_dir(lang_dir, monkeypatch):
    """Point the environment configuration at lang_dir."""
    monkeypatch.setenv("LANG_DIR", str(lang_dir))
    monkeypatch.delenv("LOCALE_DEFAULT", raising=False)
    return lang_dir


class TestGetSettings:
    """Tests for get_settings() provider function."""

    def test_get_settings_returns_cached_instance(self):
        result1 = get_settings()
        result2 = get_settings()
        assert isinstance(result1, Settings)
        assert result1 is result2

    def test_get_settings_cache_can_be_cleared(self):
        instance1 = get_settings()
        get_settings.cache_clear()
        instance2 = get_settings()
        assert instance1 is not instance2


class TestI18nProviders:
    """Tests for the dictionary store, resolver and translator providers."""

    def test_store_is_created_unloaded(self, env_lang_dir):
        store = get_dictionary_store()

        assert isinstance(store, DictionaryStore)
        assert store.is_loaded is False
        assert store.paths == [str(env_lang_dir)]

    def test_components_share_one_store(self, env_lang_dir):
        store = get_dictionary_store()
        resolver = get_locale_resolver()
        translator = get_translator()

        assert isinstance(resolver, LocaleResolver)
        assert isinstance(translator, Translator)
        assert resolver.store is store
        assert translator.store is store
        assert translator.resolver is resolver
        assert get_translator() is translator

    def test_translator_after_load(self, env_lang_dir):
        get_dictionary_store().load()

        assert get_translator().process("R.action", "de") == "ersetzt"


class TestDependencyOverridePattern:
    """Tests for FastAPI dependency override pattern."""

    def test_settings_dep_with_dependency_override(self):
        """SettingsDep can be overridden in FastAPI app."""
        app = FastAPI()
        custom = Settings(GIT_SHA="abc123")

        @app.get("/config")
        def get_config(settings: SettingsDep) -> dict:
            return {"sha": settings.GIT_SHA}

        app.dependency_overrides[get_settings] = lambda: custom

        with TestClient(app) as client:
            response = client.get("/config")

        assert response.json() == {"sha": "abc123"}

    def test_i18n_deps_with_dependency_override(self, store, translator):
        """Store and translator dependencies resolve to the overrides."""
        app = FastAPI()

        @app.get("/render")
        def render(store: DictionaryStoreDep, translator: TranslatorDep) -> dict:
            return {
                "locales": list(store.locales),
                "text": translator.process("R.action", "pt"),
            }

        app.dependency_overrides[get_dictionary_store] = lambda: store
        app.dependency_overrides[get_translator] = lambda: translator

        with TestClient(app) as client:
            response = client.get("/render")

        assert response.json() == {
            "locales": ["de-DE", "en-US", "pt-BR"],
            "text": "substitu&iacute;do",
        }


class TestRequestLocaleDep:
    """Tests for the request locale dependency."""

    def test_reads_request_state(self, resolver):
        app = FastAPI()

        @app.middleware("http")
        async def set_locale(request: Request, call_next):
            request.state.locale = "pt-BR"
            return await call_next(request)

        @app.get("/locale")
        def current(locale: RequestLocaleDep) -> dict:
            return {"locale": locale}

        app.dependency_overrides[get_locale_resolver] = lambda: resolver

        with TestClient(app) as client:
            assert client.get("/locale").json() == {"locale": "pt-BR"}

    def test_falls_back_to_default_locale(self, resolver):
        app = FastAPI()

        @app.get("/locale")
        def current(locale: RequestLocaleDep) -> dict:
            return {"locale": locale}

        app.dependency_overrides[get_locale_resolver] = lambda: resolver

        with TestClient(app) as client:
            assert client.get("/locale").json() == {"locale": "en-US"}
