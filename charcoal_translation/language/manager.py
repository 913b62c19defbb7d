"""Language manager.

Builds the language set, catalog and translator from settings and keeps the
current language (and process locale) in sync for a request or CLI run.
"""

from typing import Any, Dict, List, Mapping, Optional

from charcoal_translation.cache.pool import CachePool
from charcoal_translation.core.config import DEFAULT_LANGUAGES, LocalesSettings, TranslationsSettings
from charcoal_translation.core.errors import NotConfiguredError
from charcoal_translation.core.loader import PathLike
from charcoal_translation.core.logging import get_module_logger
from charcoal_translation.language.languages import LanguageEntry, LanguageSet
from charcoal_translation.language.locale import LocaleApplier
from charcoal_translation.language.models import LanguageRecord, LanguageRef
from charcoal_translation.language.negotiation import LanguageNegotiator
from charcoal_translation.language.repository import LanguageRepository, merge_recursive
from charcoal_translation.language.resolver import LanguageResolver
from charcoal_translation.translation.catalog import Catalog
from charcoal_translation.translation.repository import ResourceRepository
from charcoal_translation.translation.translator import Translator

logger = get_module_logger()


def active_languages(languages: Mapping[str, Any]) -> Dict[str, Dict[str, Any]]:
    """Drop inactive languages and normalize each entry to a mapping.

    Example:
        >>> active_languages({"en": "English", "fr": {"active": False}})
        {'en': {'name': 'English'}}
    """
    active = {}
    for ident, data in languages.items():
        if isinstance(data, LanguageRecord):
            data = data.to_dict()
        elif not isinstance(data, Mapping):
            data = {"name": data} if data else {}
        if "active" in data and not data["active"]:
            continue
        active[ident] = dict(data)
    return active


class LanguageManager:
    """Entry point for language state and translation lookups.

    Args:
        repository: Language index repository merged under configured data.
        base_path: Directory translation paths are resolved against.
        cache: Cache pool for the resource repository.
        locale_applier: Applies the current language to the process locale
            when it changes. Skipped when omitted.
        negotiator: Negotiates the browser language.

    Example:
        ```python
        manager = LanguageManager(repository=repository).setup(
            settings.locales, settings.translations
        )
        manager.translate("greeting", "fr")
        ```
    """

    def __init__(
        self,
        repository: Optional[LanguageRepository] = None,
        base_path: PathLike = ".",
        cache: Optional[CachePool] = None,
        locale_applier: Optional[LocaleApplier] = None,
        negotiator: Optional[LanguageNegotiator] = None,
    ):
        self.repository = repository
        self.base_path = base_path
        self.cache = cache
        self.locale_applier = locale_applier
        self.negotiator = negotiator or LanguageNegotiator()
        self.auto_detect = False
        self._resolver: Optional[LanguageResolver] = None
        self._catalog: Optional[Catalog] = None
        self._translator: Optional[Translator] = None
        self._fallback_languages: List[str] = []

    def setup(
        self,
        locales: Optional[LocalesSettings] = None,
        translations: Optional[TranslationsSettings] = None,
    ) -> "LanguageManager":
        """Build the language set, catalog and translator.

        Raises:
            InvalidLanguageError: If the configured default or current
                language is not among the active languages.
            ResourceParseError: If an index or resource file is malformed.
        """
        locales = locales or LocalesSettings()
        self._resolver = LanguageResolver(self.setup_languages(locales))
        self._fallback_languages = list(locales.FALLBACK_LANGUAGES)
        self.auto_detect = locales.AUTO_DETECT

        self._catalog = self.setup_catalog(translations)
        self._translator = Translator(self._resolver, self._fallback_languages)
        self._translator.add_catalog(self._catalog)

        logger.info(
            "language_manager_configured",
            languages=self._resolver.available_languages(),
            default_language=self._resolver.default_language(),
            current_language=self._resolver.current_language(),
            entry_count=len(self._catalog),
        )
        return self

    def setup_languages(self, locales: LocalesSettings) -> LanguageSet:
        configured = locales.LANGUAGES or {k: dict(v) for k, v in DEFAULT_LANGUAGES.items()}
        configured = active_languages(configured)

        index = self.repository.load(list(configured)) if self.repository else None
        index = index or {}

        records = [
            LanguageRecord.from_dict(merge_recursive(index.get(ident, {}), data), ident=ident)
            for ident, data in configured.items()
        ]

        languages = LanguageSet(records)
        if locales.DEFAULT_LANGUAGE:
            languages.set_default_language(locales.DEFAULT_LANGUAGE)
        if locales.CURRENT_LANGUAGE:
            languages.set_current_language(locales.CURRENT_LANGUAGE)
        return languages

    def setup_catalog(self, translations: Optional[TranslationsSettings] = None) -> Catalog:
        catalog = Catalog(resolver=self._resolver)
        if translations is None:
            return catalog

        if translations.PATHS:
            resources = ResourceRepository(
                translations.PATHS,
                base_path=self.base_path,
                cache=self.cache,
                ident=self._resolver.available_languages(),
            )
            catalog.add_resources(resources.load() or [])

        if translations.MESSAGES:
            catalog.add_entries(translations.MESSAGES)
        return catalog

    def translation(self) -> LanguageResolver:
        """Return the language configuration.

        Raises:
            NotConfiguredError: If :meth:`setup` has not run.
        """
        if self._resolver is None:
            raise NotConfiguredError("Language manager has not been set up")
        return self._resolver

    def catalog(self) -> Catalog:
        if self._catalog is None:
            raise NotConfiguredError("Language manager has not been set up")
        return self._catalog

    def translator(self) -> Translator:
        if self._translator is None:
            raise NotConfiguredError("Language manager has not been set up")
        return self._translator

    def languages(self) -> LanguageSet:
        return self.translation().languages

    def available_languages(self) -> List[str]:
        return self.translation().available_languages()

    def language(self, lang: LanguageRef) -> Optional[LanguageEntry]:
        return self.translation().language(lang)

    def current_language(self) -> Optional[str]:
        return self.translation().current_language()

    def default_language(self) -> Optional[str]:
        return self.translation().default_language()

    def fallback_languages(self) -> List[str]:
        return list(self._fallback_languages)

    def set_current_language(self, lang: Optional[LanguageRef] = None) -> "LanguageManager":
        """Set the current language and apply its locale.

        Raises:
            InvalidLanguageError: If the language is not available.
        """
        self.languages().set_current_language(lang)
        self.apply_locale()
        return self

    def apply_locale(self) -> Optional[str]:
        if self.locale_applier is None:
            return None
        return self.locale_applier.apply(self.translation())

    def translate(self, ident: str, lang: Optional[LanguageRef] = None) -> str:
        return self.catalog().translate(ident, lang)

    def detect_language(self, accept_language: Optional[str]) -> Optional[str]:
        """Return the available language best matching an Accept-Language header."""
        return self.negotiator.negotiate(accept_language, self.available_languages())
