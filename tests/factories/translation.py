"""Test data factories for the translation layer.

Provides deterministic builders for:
- LanguageSet / LanguageResolver
- TranslationValue
- Catalog
- Language index and resource files on disk
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from charcoal_translation.language import LanguageResolver, LanguageSet
from charcoal_translation.translation import Catalog, TranslationValue


def make_language_set(
    languages: Iterable[Any] = ("en", "fr"),
    default_language: Optional[str] = None,
    current_language: Optional[str] = None,
) -> LanguageSet:
    """Create a LanguageSet.

    Args:
        languages: Language idents or records, in order.
        default_language: Optional default language.
        current_language: Optional current language.

    Returns:
        LanguageSet instance.
    """
    return LanguageSet(
        list(languages),
        default_language=default_language,
        current_language=current_language,
    )


def make_resolver(
    languages: Iterable[Any] = ("en", "fr"),
    default_language: Optional[str] = None,
    current_language: Optional[str] = None,
) -> LanguageResolver:
    """Create a LanguageResolver over a fresh LanguageSet."""
    return LanguageResolver(
        make_language_set(languages, default_language, current_language)
    )


def make_translation_value(
    values: Optional[Dict[str, str]] = None,
    resolver: Optional[LanguageResolver] = None,
) -> TranslationValue:
    """Create a TranslationValue.

    Args:
        values: ``{lang: text}``; defaults to a greeting in en and fr.
        resolver: Resolver to use; an en/fr resolver when omitted.
    """
    if values is None:
        values = {"en": "Hello", "fr": "Bonjour"}
    return TranslationValue(values, resolver or make_resolver())


def make_catalog(
    entries: Optional[Dict[str, Dict[str, str]]] = None,
    resolver: Optional[LanguageResolver] = None,
) -> Catalog:
    """Create a Catalog.

    Args:
        entries: ``{ident: {lang: text}}``; a small sample when omitted.
        resolver: Resolver to use; an en/fr resolver when omitted.
    """
    if entries is None:
        entries = {
            "greeting": {"en": "Hello", "fr": "Bonjour"},
            "farewell": {"en": "Goodbye", "fr": "Au revoir"},
            "menu.home": {"en": "Home", "fr": ""},
        }
    return Catalog(entries, resolver or make_resolver())


def write_json(path: Path, data: Any) -> Path:
    """Write ``data`` as JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


def write_text(path: Path, content: str) -> Path:
    """Write ``content``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
