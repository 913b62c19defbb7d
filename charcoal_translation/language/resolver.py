"""Language resolution shared by catalogs, translation values and managers."""

from typing import Iterable, List, Optional

from charcoal_translation.core.errors import InvalidLanguageError
from charcoal_translation.language.languages import LanguageEntry, LanguageSet
from charcoal_translation.language.models import LanguageRef, resolve_language_ident


class LanguageResolver:
    """Resolve the language to use for a lookup.

    Wraps a shared LanguageSet and keeps an optional current-language
    override of its own. The override is ignored once its language is no
    longer a member of the set.

    Args:
        languages: Shared LanguageSet. A new empty set when omitted.
        current_language: Optional override, validated against the set.
    """

    def __init__(
        self,
        languages: Optional[LanguageSet] = None,
        current_language: Optional[LanguageRef] = None,
    ):
        self.languages = languages if languages is not None else LanguageSet()
        self._current: Optional[str] = None
        if current_language is not None:
            self.set_current_language(current_language)

    def current_language(self) -> Optional[str]:
        if self._current is not None and self._current in self.languages:
            return self._current
        return self.languages.current_language()

    def default_language(self) -> Optional[str]:
        return self.languages.default_language()

    def set_current_language(self, lang: Optional[LanguageRef] = None) -> "LanguageResolver":
        """Set the override; None clears it.

        Raises:
            InvalidLanguageError: If the language is not available.
        """
        if lang is None:
            self._current = None
            return self
        ident = resolve_language_ident(lang)
        if not self.languages.has_language(ident):
            raise InvalidLanguageError(ident)
        self._current = ident
        return self

    def resolve(self, lang: Optional[LanguageRef] = None) -> Optional[str]:
        """Return the language to use for a lookup.

        Args:
            lang: Explicit language, or None for the current language.

        Returns:
            Language ident, or None when no language is available.

        Raises:
            InvalidLanguageError: If an explicit language is not available.
        """
        if lang is None:
            return self.current_language()
        ident = resolve_language_ident(lang)
        if not self.languages.has_language(ident):
            raise InvalidLanguageError(ident)
        return ident

    def has_language(self, lang: LanguageRef) -> bool:
        return self.languages.has_language(lang)

    def available_languages(self, subset: Optional[Iterable[LanguageRef]] = None) -> List[str]:
        return self.languages.available_languages(subset)

    def language(self, lang: LanguageRef) -> Optional[LanguageEntry]:
        return self.languages.language(lang)

    def derive(self) -> "LanguageResolver":
        """Return a resolver over the same set, without an override."""
        return LanguageResolver(self.languages)

    def __repr__(self) -> str:
        return f"LanguageResolver({self.languages!r}, current={self._current!r})"
