"""Browser language negotiation.

Picks the best available language from an HTTP ``Accept-Language`` header.
"""

from typing import Iterable, List, Optional, Tuple

from charcoal_translation.core.logging import get_module_logger

logger = get_module_logger()


def parse_accept_language(accept_language: Optional[str]) -> List[Tuple[str, float]]:
    """Parse an Accept-Language header into language ranges by preference.

    Args:
        accept_language: Header value, e.g. ``"fr-CA,fr;q=0.9,en;q=0.8"``.

    Returns:
        ``(range, quality)`` tuples sorted by quality, highest first. Ranges
        with a quality of zero are dropped.
    """
    if not accept_language:
        return []

    preferences = []
    for part in accept_language.split(","):
        lang_range = part.split(";")[0].strip()
        if not lang_range:
            continue
        quality = 1.0

        if ";" in part and "q=" in part:
            try:
                quality = float(part.split("q=")[1])
            except ValueError:
                quality = 1.0

        if quality > 0:
            preferences.append((lang_range, quality))

    # sorted() is stable; ties keep header order
    return sorted(preferences, key=lambda x: x[1], reverse=True)


class LanguageNegotiator:
    """Match requested language ranges against available languages.

    Exact matches win over language-only matches (``fr-CA`` matches ``fr``).
    """

    @staticmethod
    def matches_language(requested: str, available: str, strict: bool = False) -> bool:
        """Check if an available language matches a requested language.

        Args:
            requested: Requested language tag (e.g., "en-US").
            available: Available language tag (e.g., "en").
            strict: If True, requires exact match.

        Returns:
            True if languages match.
        """
        requested = requested.replace("_", "-").lower()
        available = available.replace("_", "-").lower()
        if requested == available:
            return True

        if strict:
            return False

        return requested.split("-")[0] == available.split("-")[0]

    @staticmethod
    def find_best_match(
        requested: Iterable[str],
        available: Iterable[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find the best matching language from available options.

        Args:
            requested: Requested language tags in preference order.
            available: Available language idents.
            default: Returned when nothing matches.

        Returns:
            Best matching available language, or ``default``.
        """
        available = list(available)
        for req_lang in requested:
            if req_lang == "*" and available:
                return available[0]

            for avail_lang in available:
                if LanguageNegotiator.matches_language(req_lang, avail_lang, strict=True):
                    return avail_lang

            for avail_lang in available:
                if LanguageNegotiator.matches_language(req_lang, avail_lang):
                    return avail_lang

        return default

    def negotiate(
        self,
        accept_language: Optional[str],
        available: Iterable[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Resolve the browser language from an Accept-Language header.

        Returns:
            The matched available language, or ``default``.
        """
        requested = [lang for lang, _ in parse_accept_language(accept_language)]
        match = self.find_best_match(requested, available, default)

        if match is None or match == default:
            logger.debug("no_matching_language_in_header", accept_language=accept_language)
        else:
            logger.debug("resolved_language_from_header", language=match)
        return match
