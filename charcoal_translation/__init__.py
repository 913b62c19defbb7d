"""Multilingual strings and translation catalogs.

Usage:

    from charcoal_translation import Catalog, LanguageResolver, LanguageSet

    resolver = LanguageResolver(LanguageSet(["en", "fr"]))
    catalog = Catalog({"greeting": {"en": "Hello", "fr": "Bonjour"}}, resolver)
    catalog.translate("greeting", "fr")
"""

from charcoal_translation.core.errors import (
    InvalidArgumentError,
    InvalidLanguageError,
    NotConfiguredError,
    ResourceParseError,
    TranslationError,
)
from charcoal_translation.language import (
    Direction,
    LanguageRecord,
    LanguageRepository,
    LanguageResolver,
    LanguageSet,
)
from charcoal_translation.translation import (
    Catalog,
    Resource,
    ResourceRepository,
    TranslationValue,
    Translator,
)
from charcoal_translation.language.manager import LanguageManager

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "Direction",
    "InvalidArgumentError",
    "InvalidLanguageError",
    "LanguageManager",
    "LanguageRecord",
    "LanguageRepository",
    "LanguageResolver",
    "LanguageSet",
    "NotConfiguredError",
    "Resource",
    "ResourceParseError",
    "ResourceRepository",
    "TranslationError",
    "TranslationValue",
    "Translator",
]
