"""Shared fixtures for translation layer tests."""

import pytest

from charcoal_translation.cache import MemoryCachePool
from charcoal_translation.language import LanguageResolver
from tests.factories.translation import (
    make_catalog,
    make_language_set,
    make_resolver,
    write_json,
    write_text,
)


@pytest.fixture
def language_set():
    """LanguageSet with en (default) and fr."""
    return make_language_set()


@pytest.fixture
def resolver(language_set):
    """LanguageResolver over the shared ``language_set`` fixture."""
    return LanguageResolver(language_set)


@pytest.fixture
def plurilingual_resolver():
    """LanguageResolver with en, fr and es."""
    return make_resolver(("en", "fr", "es"))


@pytest.fixture
def catalog(resolver):
    """Catalog with greeting, farewell and menu.home entries."""
    return make_catalog(resolver=resolver)


@pytest.fixture
def memory_pool():
    """Fresh in-memory cache pool."""
    return MemoryCachePool()


@pytest.fixture
def translations_dir(tmp_path):
    """Create a translations directory with one file per supported layout.

    Returns a directory structure like:
    - translations/messages.json        (multilingual)
    - translations/messages.fr.json     (monolingual, dotted tag)
    - translations/es/menu.yaml         (monolingual, segment tag)
    - translations/.hidden/skip.json    (ignored)
    - translations/notes.txt            (ignored)
    """
    root = tmp_path / "translations"
    write_json(
        root / "messages.json",
        {"greeting": {"en": "Hello", "fr": "Bonjour"}},
    )
    write_json(
        root / "messages.fr.json",
        {"farewell": "Au revoir", "menu": {"home": "Accueil"}},
    )
    write_text(root / "es" / "menu.yaml", "menu:\n  home: Inicio\n")
    write_json(root / ".hidden" / "skip.json", {"hidden": {"en": "Hidden"}})
    write_text(root / "notes.txt", "not a resource")
    return root
