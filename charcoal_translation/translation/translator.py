"""Message translator.

Holds per-domain, per-locale message tables, looks messages up through a
chain of fallback locales and interpolates ``{{name}}`` / ``{name}``
placeholders.
"""

import re
from typing import Any, Dict, Iterable, List, Mapping, Optional

from charcoal_translation.core.errors import InvalidArgumentError
from charcoal_translation.core.logging import get_module_logger
from charcoal_translation.language.models import LanguageRef, resolve_language_ident
from charcoal_translation.language.resolver import LanguageResolver
from charcoal_translation.translation.catalog import Catalog
from charcoal_translation.translation.value import TranslationValue

logger = get_module_logger()

DEFAULT_DOMAIN = "messages"

DOUBLE_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")
SINGLE_PLACEHOLDER = re.compile(r"\{(\w+)\}")


class Translator:
    """Translate messages with fallback locales and variable interpolation.

    Attributes:
        resolver: Resolver whose language set provides the current locale.
        fallback_locales: Locales searched, in order, when a message is
            missing from the requested locale.
    """

    def __init__(
        self,
        resolver: Optional[LanguageResolver] = None,
        fallback_locales: Optional[Iterable[str]] = None,
    ):
        self.resolver = resolver if resolver is not None else LanguageResolver()
        self.fallback_locales: List[str] = list(fallback_locales or [])
        self._messages: Dict[str, Dict[str, Dict[str, str]]] = {}

    def locale(self) -> Optional[str]:
        return self.resolver.current_language()

    def set_locale(self, locale: LanguageRef) -> "Translator":
        """Set the current language of the shared language set.

        Raises:
            InvalidLanguageError: If the language is not available.
        """
        self.resolver.languages.set_current_language(locale)
        return self

    def available_locales(self) -> List[str]:
        return self.resolver.available_languages()

    def add_resource(
        self, messages: Mapping[str, Any], lang: LanguageRef, domain: str = DEFAULT_DOMAIN
    ) -> "Translator":
        """Register ``{ident: text}`` messages for a language and domain."""
        lang = resolve_language_ident(lang)
        table = self._messages.setdefault(domain, {}).setdefault(lang, {})
        for ident, text in messages.items():
            if text is not None and text != "":
                table[str(ident)] = str(text)
        return self

    def add_catalog(self, catalog: Catalog, domain: str = DEFAULT_DOMAIN) -> "Translator":
        """Register every non-empty value of a catalog."""
        by_lang: Dict[str, Dict[str, str]] = {}
        for ident, translations in catalog.to_dict().items():
            for lang, text in translations.items():
                by_lang.setdefault(lang, {})[ident] = text
        for lang, messages in by_lang.items():
            self.add_resource(messages, lang, domain)
        return self

    def has(self, ident: str, locale: Optional[str] = None, domain: str = DEFAULT_DOMAIN) -> bool:
        locale = locale or self.locale()
        return ident in self._messages.get(domain, {}).get(locale, {})

    def trans(
        self,
        ident: str,
        parameters: Optional[Mapping[str, Any]] = None,
        domain: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Translate a message ident.

        Args:
            ident: Message ident.
            parameters: Values for ``{{name}}`` / ``{name}`` placeholders.
                Placeholders are left alone when omitted.
            domain: Message domain (``messages`` by default).
            locale: Locale to translate to (the current language by default).

        Returns:
            The translated message, or ``ident`` when no locale has it.

        Raises:
            InvalidArgumentError: If a placeholder has no parameter.
        """
        domain = domain or DEFAULT_DOMAIN
        locale = locale or self.locale()
        tables = self._messages.get(domain, {})

        message = None
        for candidate in self._locale_chain(locale):
            message = tables.get(candidate, {}).get(ident)
            if message:
                if candidate != locale:
                    logger.debug(
                        "used_fallback_translation",
                        ident=ident,
                        requested_locale=locale,
                        fallback_locale=candidate,
                    )
                break

        if not message:
            message = ident

        if parameters is not None:
            message = self._interpolate(message, parameters)
        return message

    def translation(self, val: Any) -> Optional[TranslationValue]:
        """Build a TranslationValue with every available language filled in.

        A language is filled from :meth:`trans` when it has no value or its
        value equals the source string.

        Returns:
            TranslationValue, or None when ``val`` is not translatable.
        """
        if not TranslationValue.is_translatable(val):
            return None

        translation = TranslationValue(val, self.resolver)
        source = str(translation)
        for lang in self.available_locales():
            stale = isinstance(val, str) and translation.all().get(lang) == val
            if stale or not translation.has_value(lang):
                translation.add_value(lang, self.trans(source, locale=lang))
        return translation

    def translate(self, val: Any) -> str:
        """Translate a string, a mapping or a TranslationValue.

        Returns:
            The translated string, ``""`` when ``val`` is not translatable.
        """
        if isinstance(val, str):
            return self.trans(val)
        translation = self.translation(val)
        return str(translation) if translation is not None else ""

    def _locale_chain(self, locale: Optional[str]) -> List[str]:
        chain = [locale] if locale else []
        for fallback in self.fallback_locales:
            if fallback not in chain:
                chain.append(fallback)
        return chain

    def _interpolate(self, message: str, parameters: Mapping[str, Any]) -> str:
        """Replace ``{{name}}`` and ``{name}`` placeholders.

        Raises:
            InvalidArgumentError: If a placeholder has no parameter.
        """
        names = []
        for name in DOUBLE_PLACEHOLDER.findall(message) + SINGLE_PLACEHOLDER.findall(message):
            if name not in names:
                names.append(name)

        for name in names:
            if name not in parameters:
                logger.error(
                    "missing_interpolation_variable",
                    variable=name,
                    available_variables=list(parameters.keys()),
                )
                raise InvalidArgumentError(f"Missing interpolation variable: {name}")

        # Double braces first so "{{name}}" is not left as "{value}".
        message = DOUBLE_PLACEHOLDER.sub(lambda m: str(parameters[m.group(1)]), message)
        return SINGLE_PLACEHOLDER.sub(lambda m: str(parameters[m.group(1)]), message)
