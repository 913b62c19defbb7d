"""Multilingual string value.

A TranslationValue holds one string per language and resolves to a single
string using the current, default and fallback language policy of its
LanguageResolver.
"""

import json
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional

from charcoal_translation.core.errors import InvalidArgumentError, describe_type
from charcoal_translation.language.models import LanguageRef, resolve_language_ident
from charcoal_translation.language.resolver import LanguageResolver


class TranslationValue:
    """A string with one value per language.

    Args:
        value: A ``{lang: text}`` mapping, another TranslationValue (copied)
            or a string assigned to the current language.
        resolver: Resolver for the available languages. The value keeps its
            own current-language override on top of it.

    Example:
        >>> resolver = LanguageResolver(LanguageSet(["en", "fr"]))
        >>> greeting = TranslationValue({"en": "Hello", "fr": ""}, resolver)
        >>> greeting.value("fr")
        'Hello'
    """

    def __init__(self, value: Any = None, resolver: Optional[LanguageResolver] = None):
        self.resolver = resolver.derive() if resolver is not None else LanguageResolver()
        self._values: Dict[str, str] = {}
        if value is not None:
            self.set_value(value)

    def set_value(self, value: Any) -> "TranslationValue":
        """Assign the value.

        Raises:
            InvalidArgumentError: If the value is not a mapping, a
                TranslationValue or a string, or a string is given while no
                language is available.
        """
        if isinstance(value, TranslationValue):
            self._values = value.all()
        elif isinstance(value, Mapping):
            self._values = {}
            for lang, text in value.items():
                self._values[resolve_language_ident(lang)] = "" if text is None else str(text)
        elif isinstance(value, str):
            lang = self.current_language()
            if lang is None:
                raise InvalidArgumentError("Cannot assign a string without an available language")
            self._values[lang] = value
        else:
            raise InvalidArgumentError(
                f"Invalid localized value, received {describe_type(value)}"
            )
        return self

    def add_value(self, lang: LanguageRef, value: str) -> "TranslationValue":
        """Set the value for a single language.

        Raises:
            InvalidArgumentError: If ``value`` is not a string.
        """
        ident = resolve_language_ident(lang)
        if not isinstance(value, str):
            raise InvalidArgumentError("Localized value must be a string")
        self._values[ident] = value
        return self

    def remove_value(self, lang: LanguageRef) -> "TranslationValue":
        self._values.pop(resolve_language_ident(lang), None)
        return self

    def value(self, lang: Optional[LanguageRef] = None) -> str:
        """Resolve the string for a language.

        An omitted language uses the current language. When the language has
        no value, the default language's value is used, then ``""``.

        Raises:
            InvalidLanguageError: If an explicit language is not available.
        """
        ident = self.resolver.resolve(lang)
        if ident is None:
            return ""
        if self._values.get(ident):
            return self._values[ident]
        return self._values.get(self.default_language()) or ""

    def fallback(self, lang: Optional[LanguageRef] = None) -> str:
        """Like :meth:`value`, then the first other populated language."""
        text = self.value(lang)
        if text:
            return text

        tried = {self.resolver.resolve(lang), self.default_language()}
        for ident, text in self._values.items():
            if ident not in tried and text:
                return text
        return ""

    def has_value(self, lang: Optional[LanguageRef] = None) -> bool:
        ident = self.current_language() if lang is None else resolve_language_ident(lang)
        return bool(self._values.get(ident))

    def all(self) -> Dict[str, str]:
        return dict(self._values)

    def translations(self, langs: Optional[Iterable[LanguageRef]] = None) -> Dict[str, str]:
        if not langs:
            return self.all()
        wanted = [resolve_language_ident(lang) for lang in langs]
        return {lang: text for lang, text in self._values.items() if lang in wanted}

    def current_language(self) -> Optional[str]:
        return self.resolver.current_language()

    def default_language(self) -> Optional[str]:
        return self.resolver.default_language()

    def set_current_language(self, lang: Optional[LanguageRef] = None) -> "TranslationValue":
        self.resolver.set_current_language(lang)
        return self

    def to_dict(self) -> Dict[str, str]:
        return self.all()

    def serialize(self) -> str:
        return json.dumps(self._values, ensure_ascii=False)

    @classmethod
    def deserialize(cls, data: str, resolver: Optional[LanguageResolver] = None) -> "TranslationValue":
        """Rebuild a value from :meth:`serialize` output.

        Raises:
            InvalidArgumentError: If ``data`` is not a JSON object.
        """
        try:
            values = json.loads(data)
        except (TypeError, json.JSONDecodeError) as e:
            raise InvalidArgumentError(f"Cannot deserialize translation value: {e}") from e
        if not isinstance(values, dict):
            raise InvalidArgumentError(
                f"Serialized translation value must be an object, received {describe_type(values)}"
            )
        return cls(values, resolver)

    @staticmethod
    def is_translatable(var: Any) -> bool:
        """Check whether a value holds anything worth translating.

        True for a string that is not blank, a TranslationValue with at least
        one non-empty value, or a mapping with at least one pair where both
        the key and the value are non-empty strings.
        """
        if var is None:
            return False
        if isinstance(var, str):
            return bool(var.strip())
        if isinstance(var, TranslationValue):
            return any(var._values.values())
        if isinstance(var, Mapping):
            return any(
                isinstance(k, str) and isinstance(v, str) and k and v
                for k, v in var.items()
            )
        return False

    def __str__(self) -> str:
        return self.value()

    def __repr__(self) -> str:
        return f"TranslationValue({self._values!r})"

    def __getitem__(self, lang: LanguageRef) -> str:
        return self.value(lang)

    def __setitem__(self, lang: LanguageRef, value: str) -> None:
        self.add_value(lang, value)

    def __delitem__(self, lang: LanguageRef) -> None:
        self.remove_value(lang)

    def __contains__(self, lang: Any) -> bool:
        if not isinstance(lang, str):
            return False
        return self.has_value(lang)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return True

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, TranslationValue):
            return self._values == other._values
        if isinstance(other, Mapping):
            return self._values == dict(other)
        return NotImplemented

    __hash__ = None

    def __getstate__(self) -> Dict[str, Any]:
        return {"values": dict(self._values), "resolver": self.resolver}

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self._values = state["values"]
        self.resolver = state.get("resolver") or LanguageResolver()
