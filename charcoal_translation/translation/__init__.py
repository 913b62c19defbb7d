"""Translation values, catalogs, resources and the message translator.

Usage:

    from charcoal_translation.translation import Catalog, TranslationValue

    catalog = Catalog({"greeting": {"en": "Hello", "fr": "Bonjour"}}, resolver)
    catalog.translate("greeting", "fr")
"""

from charcoal_translation.translation.catalog import Catalog
from charcoal_translation.translation.repository import ResourceRepository
from charcoal_translation.translation.resource import Resource, load_resource
from charcoal_translation.translation.translator import Translator
from charcoal_translation.translation.value import TranslationValue

__all__ = [
    "Catalog",
    "Resource",
    "ResourceRepository",
    "TranslationValue",
    "Translator",
    "load_resource",
]
