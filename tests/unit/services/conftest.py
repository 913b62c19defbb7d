"""Fixtures for dependency injection tests."""

import pytest

from charcoal_translation.language import LocaleApplier
from charcoal_translation.services import providers


def _clear_provider_caches():
    providers.get_settings.cache_clear()
    providers.get_cache_pool.cache_clear()
    providers.get_language_repository.cache_clear()


@pytest.fixture(autouse=True)
def fresh_providers():
    """Reset application-scoped providers around each test."""
    _clear_provider_caches()
    yield
    _clear_provider_caches()


@pytest.fixture
def applied_locales(monkeypatch):
    """Replace the process locale side effect with a recorder."""
    applied = []

    def setlocale(category, name):
        applied.append(name)
        return name

    monkeypatch.setattr(
        providers, "LocaleApplier", lambda: LocaleApplier(setlocale=setlocale)
    )
    return applied


@pytest.fixture
def translation_env(monkeypatch, tmp_path):
    """Environment with inline messages and browser language detection."""
    monkeypatch.setenv("BASE_PATH", str(tmp_path))
    monkeypatch.setenv(
        "TRANSLATIONS_MESSAGES",
        '{"greeting": {"en": "Hello", "fr": "Bonjour"}, "welcome": {"en": "Welcome {name}"}}',
    )
    monkeypatch.setenv("LOCALES_AUTO_DETECT", "true")
    monkeypatch.setenv("CACHE_ENABLED", "true")
