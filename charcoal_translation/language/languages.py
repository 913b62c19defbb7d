"""Available languages with default and current language state.

The default language acts as the fallback when the current language has no
value. The current language, when unset, resolves to the default language.
Both are re-resolved lazily whenever membership changes.
"""

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from charcoal_translation.core.errors import (
    InvalidArgumentError,
    InvalidLanguageError,
    describe_type,
)
from charcoal_translation.language.models import (
    LanguageRecord,
    LanguageRef,
    resolve_language_ident,
)

LanguageEntry = Union[LanguageRecord, str]


def _normalize_entry(lang: Any, ident: Optional[str] = None) -> Tuple[str, LanguageEntry]:
    if isinstance(lang, LanguageRecord):
        return lang.ident, lang
    if isinstance(lang, str):
        return lang, lang
    if isinstance(lang, Mapping):
        record = LanguageRecord.from_dict(lang, ident=ident)
        return record.ident, record
    raise InvalidArgumentError(
        f"Language must be a string, a language record or a mapping, "
        f"received {describe_type(lang)}"
    )


class LanguageSet:
    """Insertion-ordered set of available languages.

    Example:
        >>> languages = LanguageSet(["en", "fr"])
        >>> languages.default_language()
        'en'
        >>> languages.set_current_language("fr").current_language()
        'fr'
    """

    def __init__(
        self,
        languages: Optional[Union[Iterable[Any], Mapping[str, Any]]] = None,
        default_language: Optional[LanguageRef] = None,
        current_language: Optional[LanguageRef] = None,
    ):
        self._languages: Dict[str, LanguageEntry] = {}
        self._default: Optional[str] = None
        self._current: Optional[str] = None
        if languages:
            self.add_languages(languages)
        if default_language:
            self.set_default_language(default_language)
        if current_language:
            self.set_current_language(current_language)

    def languages(self, subset: Optional[Iterable[LanguageRef]] = None) -> Dict[str, LanguageEntry]:
        """Return the available languages, optionally limited to a subset."""
        if subset:
            wanted = {resolve_language_ident(lang) for lang in subset}
            return {k: v for k, v in self._languages.items() if k in wanted}
        return dict(self._languages)

    def available_languages(self, subset: Optional[Iterable[LanguageRef]] = None) -> List[str]:
        """Return the available language idents, optionally limited to a subset."""
        return list(self.languages(subset))

    def set_languages(self, langs: Union[Iterable[Any], Mapping[str, Any]]) -> "LanguageSet":
        """Replace the available languages.

        An empty collection clears the set. Default and current languages are
        re-resolved against the new members.
        """
        self._languages = {}
        return self.add_languages(langs)

    def add_languages(self, langs: Union[Iterable[Any], Mapping[str, Any]]) -> "LanguageSet":
        if isinstance(langs, (str, LanguageRecord)):
            return self.add_language(langs)
        if isinstance(langs, Mapping):
            if "ident" in langs:
                return self.add_language(langs)
            for ident, lang in langs.items():
                self._add(lang, ident)
        else:
            for lang in langs:
                self._add(lang)
        self._resolve_special_languages()
        return self

    def add_language(self, lang: Any) -> "LanguageSet":
        self._add(lang)
        self._resolve_special_languages()
        return self

    def _add(self, lang: Any, ident: Optional[str] = None) -> None:
        if ident is not None and not isinstance(lang, (LanguageRecord, Mapping)):
            # Bare mapping values such as ``{"en": "English"}`` keep the key as ident.
            lang = {"ident": ident, "name": lang} if lang else ident
        key, entry = _normalize_entry(lang, ident)
        self._languages[key] = entry

    def remove_language(self, lang: LanguageRef) -> "LanguageSet":
        """Remove a language; a no-op when it is not available."""
        self._languages.pop(resolve_language_ident(lang), None)
        self._resolve_special_languages()
        return self

    def language(self, lang: LanguageRef) -> Optional[LanguageEntry]:
        return self._languages.get(resolve_language_ident(lang))

    def has_language(self, lang: LanguageRef) -> bool:
        return resolve_language_ident(lang) in self._languages

    def default_language(self) -> Optional[str]:
        if self._default not in self._languages:
            self._default = self._first_language()
        return self._default

    def set_default_language(self, lang: Optional[LanguageRef] = None) -> "LanguageSet":
        """Set the default language; None resets it to the first member.

        Raises:
            InvalidLanguageError: If the language is not available.
        """
        if lang is None:
            self._default = self._first_language()
            return self
        self._default = self._validate(lang)
        return self

    def current_language(self) -> Optional[str]:
        if self._current is not None and self._current in self._languages:
            return self._current
        return self.default_language()

    def set_current_language(self, lang: Optional[LanguageRef] = None) -> "LanguageSet":
        """Set the current language; None falls back to the default language.

        Raises:
            InvalidLanguageError: If the language is not available.
        """
        self._current = None if lang is None else self._validate(lang)
        return self

    def is_multilingual(self) -> bool:
        return len(self._languages) > 1

    def is_bilingual(self) -> bool:
        return len(self._languages) == 2

    def is_plurilingual(self) -> bool:
        return len(self._languages) > 2

    def _validate(self, lang: LanguageRef) -> str:
        ident = resolve_language_ident(lang)
        if ident not in self._languages:
            raise InvalidLanguageError(ident)
        return ident

    def _first_language(self) -> Optional[str]:
        return next(iter(self._languages), None)

    def _resolve_special_languages(self) -> None:
        if self._default not in self._languages:
            self._default = self._first_language()
        if self._current not in self._languages:
            self._current = None

    def __len__(self) -> int:
        return len(self._languages)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._languages))

    def __contains__(self, lang: Any) -> bool:
        try:
            return self.has_language(lang)
        except InvalidArgumentError:
            return False

    def __repr__(self) -> str:
        return (
            f"LanguageSet({self.available_languages()!r}, "
            f"default={self._default!r}, current={self._current!r})"
        )
