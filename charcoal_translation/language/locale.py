"""Apply the active language to the process locale.

This is the only place the translation layer touches ``locale.setlocale``.
"""

import locale
from typing import Callable, List, Optional

from charcoal_translation.core.logging import get_module_logger
from charcoal_translation.language.models import LanguageRecord
from charcoal_translation.language.resolver import LanguageResolver

logger = get_module_logger()


def locale_candidates(tag: str) -> List[str]:
    """Return the names ``setlocale`` may know a locale tag by.

    Example:
        >>> locale_candidates("fr-CA")
        ['fr-CA', 'fr_CA', 'fr_CA.UTF-8']
    """
    candidates = [tag]
    posix = tag.replace("-", "_")
    if posix not in candidates:
        candidates.append(posix)
    if "." not in posix:
        candidates.append(f"{posix}.UTF-8")
    return candidates


class LocaleApplier:
    """Set the process locale from a resolver's current and default languages.

    Args:
        category: ``locale`` category to set (``LC_ALL`` by default).
        setlocale: Function used to set the locale; ``locale.setlocale``
            unless replaced (e.g. in tests).
    """

    def __init__(
        self,
        category: int = locale.LC_ALL,
        setlocale: Optional[Callable[[int, str], str]] = None,
    ):
        self.category = category
        self._setlocale = setlocale or locale.setlocale

    def locales(self, resolver: LanguageResolver) -> List[str]:
        """Locale tags to try, current language first then default language."""
        current = resolver.current_language()
        fallback = resolver.default_language()

        idents = [current]
        if fallback != current:
            idents.append(fallback)

        tags = []
        for ident in idents:
            if ident is None:
                continue
            language = resolver.language(ident)
            if isinstance(language, LanguageRecord):
                tag = language.locale or language.code
            else:
                tag = ident
            if tag:
                tags.append(tag)
        return tags

    def apply(self, resolver: LanguageResolver) -> Optional[str]:
        """Set the first locale the system accepts.

        Returns:
            The locale name that was set, or None when none was accepted.
        """
        tags = self.locales(resolver)
        for tag in tags:
            for candidate in locale_candidates(tag):
                try:
                    applied = self._setlocale(self.category, candidate)
                except locale.Error:
                    continue
                logger.debug("locale_applied", locale=applied, tag=tag)
                return applied

        if tags:
            logger.warning("locale_not_available", tags=tags)
        return None
