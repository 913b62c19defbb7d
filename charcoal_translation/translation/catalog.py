"""Catalog of translation entries keyed by message ident."""

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Union

from charcoal_translation.core.errors import InvalidArgumentError, describe_type
from charcoal_translation.core.logging import get_module_logger
from charcoal_translation.language.models import LanguageRef, resolve_language_ident
from charcoal_translation.language.resolver import LanguageResolver
from charcoal_translation.translation.resource import Resource
from charcoal_translation.translation.value import TranslationValue

logger = get_module_logger()

Translations = Union[str, Mapping[str, Any], TranslationValue]


class Catalog:
    """Message idents mapped to TranslationValue entries.

    Looking up a translation never fails because of missing data: an unknown
    ident, or an entry without a value in the requested and default
    languages, resolves to the ident itself. Only an explicit language that is
    not available raises.

    Args:
        entries: Initial entries, ``{ident: translations}``.
        resolver: Resolver for the available languages. The catalog keeps its
            own current-language override on top of it.

    Example:
        ```python
        catalog = Catalog({"greeting": {"en": "Hello", "fr": "Bonjour"}}, resolver)
        catalog.translate("greeting", "fr")   # "Bonjour"
        catalog.translate("missing.id")       # "missing.id"
        ```
    """

    def __init__(
        self,
        entries: Optional[Union[Mapping[str, Any], Iterable[Any]]] = None,
        resolver: Optional[LanguageResolver] = None,
    ):
        self.resolver = resolver.derive() if resolver is not None else LanguageResolver()
        self._entries: Dict[str, TranslationValue] = {}
        if entries:
            self.add_entries(entries)

    # Languages

    def current_language(self) -> Optional[str]:
        return self.resolver.current_language()

    def default_language(self) -> Optional[str]:
        return self.resolver.default_language()

    def set_current_language(self, lang: Optional[LanguageRef] = None) -> "Catalog":
        self.resolver.set_current_language(lang)
        return self

    def available_languages(self) -> List[str]:
        return self.resolver.available_languages()

    # Entries

    def entries(self, lang: Optional[LanguageRef] = None) -> List[str]:
        """Return entry idents, optionally only those translated in ``lang``.

        Raises:
            InvalidLanguageError: If ``lang`` is not available.
        """
        if lang is None:
            return list(self._entries)
        ident = self.resolver.resolve(lang)
        return [key for key, value in self._entries.items() if value.has_value(ident)]

    def entry(self, ident: str) -> Optional[TranslationValue]:
        return self._entries.get(ident)

    def has_entry(self, ident: str) -> bool:
        return ident in self._entries

    def add_entry(
        self, ident: Union[str, Translations], translations: Optional[Translations] = None
    ) -> "Catalog":
        """Add or replace an entry.

        When only a mapping (or TranslationValue) is given, its value in the
        default language becomes the ident.

        Raises:
            InvalidArgumentError: If the ident cannot be determined.
        """
        if translations is None and isinstance(ident, (Mapping, TranslationValue)):
            value = TranslationValue(ident, self.resolver)
            default = self.default_language()
            key = value.all().get(default) if default else None
            if not key:
                raise InvalidArgumentError(
                    "Entry ident is missing; no value found in the default language "
                    f'"{default}"'
                )
            self._entries[key] = value
            return self

        self._entries[self._validate_ident(ident)] = TranslationValue(
            {} if translations is None else translations, self.resolver
        )
        return self

    def add_entries(self, entries: Union[Mapping[str, Any], Iterable[Any]]) -> "Catalog":
        if isinstance(entries, Mapping):
            for ident, translations in entries.items():
                self.add_entry(ident, translations)
        elif isinstance(entries, (str, bytes)):
            raise InvalidArgumentError(
                f"Entries must be a mapping or a list of translations, received {describe_type(entries)}"
            )
        else:
            for translations in entries:
                self.add_entry(translations)
        return self

    def set_entries(self, entries: Union[Mapping[str, Any], Iterable[Any]]) -> "Catalog":
        self._entries = {}
        return self.add_entries(entries)

    def add_entry_translation(self, ident: str, lang: LanguageRef, value: str) -> "Catalog":
        """Merge one language into an entry, creating the entry if needed."""
        ident = self._validate_ident(ident)
        lang = resolve_language_ident(lang)
        entry = self._entries.get(ident)
        if entry is None:
            self.add_entry(ident, {lang: value})
        else:
            entry.add_value(lang, value)
        return self

    def remove_entry(self, ident: str) -> "Catalog":
        self._entries.pop(ident, None)
        return self

    def remove_entry_translation(self, ident: str, lang: LanguageRef) -> "Catalog":
        entry = self._entries.get(ident)
        if entry is not None:
            entry.remove_value(lang)
        return self

    # Resources

    def add_resource(self, resource: Resource) -> "Catalog":
        """Fold a resource into the catalog.

        Monolingual resources merge each message into its entry; multilingual
        resources replace each entry.
        """
        lang = resource.source_language
        if lang:
            for ident, message in resource.items():
                self.add_entry_translation(ident, lang, str(message))
        else:
            for ident, translations in resource.items():
                self.add_entry(ident, translations)

        logger.debug(
            "catalog_resource_added",
            path=str(resource.path) if resource.path else None,
            source_language=lang,
            message_count=len(resource),
        )
        return self

    def add_resources(self, resources: Iterable[Resource]) -> "Catalog":
        if resources is None or isinstance(resources, (Resource, str)):
            raise InvalidArgumentError("Must be a list of resources")
        for resource in resources:
            self.add_resource(resource)
        return self

    # Lookup

    def translate(self, ident: str, lang: Optional[LanguageRef] = None) -> str:
        """Translate a message ident.

        Args:
            ident: Message ident.
            lang: Explicit language, or None for the current language.

        Returns:
            The translation, falling back to the default language and then to
            ``ident`` itself.

        Raises:
            InvalidLanguageError: If an explicit language is not available.
        """
        resolved = self.resolver.resolve(lang)
        if resolved is None:
            return ident

        entry = self._entries.get(ident)
        if entry is None:
            return ident

        return entry.value(resolved) or ident

    def get(self, ident: str) -> str:
        return self.translate(ident)

    def set(self, ident: str, value: Translations) -> "Catalog":
        """Assign an entry.

        A string writes the current language only; a mapping or
        TranslationValue replaces the whole entry.
        """
        if isinstance(value, str):
            lang = self.current_language()
            if lang is None:
                raise InvalidArgumentError("Cannot assign a string without an available language")
            return self.add_entry_translation(ident, lang, value)
        if isinstance(value, (Mapping, TranslationValue)):
            return self.add_entry(ident, value)
        raise InvalidArgumentError(
            f"Entry value must be a string, a mapping or a translation value, "
            f"received {describe_type(value)}"
        )

    def has(self, ident: str) -> bool:
        return self.has_entry(ident)

    def remove(self, ident: str) -> "Catalog":
        return self.remove_entry(ident)

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {ident: value.all() for ident, value in self._entries.items()}

    @staticmethod
    def _validate_ident(ident: Any) -> str:
        if not isinstance(ident, str):
            raise InvalidArgumentError(
                f"Entry ident must be a string, received {describe_type(ident)}"
            )
        return ident

    def __getitem__(self, ident: str) -> str:
        return self.translate(ident)

    def __setitem__(self, ident: str, value: Translations) -> None:
        self.set(ident, value)

    def __delitem__(self, ident: str) -> None:
        self.remove_entry(ident)

    def __contains__(self, ident: Any) -> bool:
        return isinstance(ident, str) and ident in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Catalog({len(self)} entries, languages={self.available_languages()!r})"
