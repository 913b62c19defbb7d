"""Language metadata, language sets and language resolution.

The LanguageManager lives in ``charcoal_translation.language.manager``; it
depends on the translation package and is imported from there.
"""

from charcoal_translation.language.languages import LanguageSet
from charcoal_translation.language.locale import LocaleApplier
from charcoal_translation.language.models import (
    NOT_APPLICABLE,
    NOT_CODED,
    SPECIAL_IDENTS,
    UNDETERMINED,
    Direction,
    LanguageRecord,
    LanguageRef,
    resolve_language_ident,
)
from charcoal_translation.language.negotiation import LanguageNegotiator, parse_accept_language
from charcoal_translation.language.repository import DEFAULT_INDEX_PATH, LanguageRepository
from charcoal_translation.language.resolver import LanguageResolver

__all__ = [
    "DEFAULT_INDEX_PATH",
    "NOT_APPLICABLE",
    "NOT_CODED",
    "SPECIAL_IDENTS",
    "UNDETERMINED",
    "Direction",
    "LanguageNegotiator",
    "LanguageRecord",
    "LanguageRef",
    "LanguageRepository",
    "LanguageResolver",
    "LanguageSet",
    "LocaleApplier",
    "parse_accept_language",
    "resolve_language_ident",
]
