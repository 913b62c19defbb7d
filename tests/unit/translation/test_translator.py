"""Unit tests for translation.translator.Translator."""

import pytest

from charcoal_translation.core.errors import InvalidArgumentError, InvalidLanguageError
from charcoal_translation.translation import TranslationValue, Translator
from tests.factories.translation import make_catalog


@pytest.mark.unit
class TestTranslator:
    """Tests for Translator message lookup."""

    @pytest.fixture
    def translator(self, resolver):
        """Translator with the sample catalog and an English fallback."""
        translator = Translator(resolver, fallback_locales=["en"])
        translator.add_catalog(make_catalog(resolver=resolver))
        translator.add_resource({"welcome": "Welcome {{name}}"}, "en")
        translator.add_resource({"welcome": "Bienvenue {name}"}, "fr")
        return translator

    def test_trans_current_locale(self, translator):
        """trans() uses the resolver's current language."""
        assert translator.locale() == "en"
        assert translator.trans("greeting") == "Hello"

    def test_trans_explicit_locale(self, translator):
        """trans() honours an explicit locale."""
        assert translator.trans("greeting", locale="fr") == "Bonjour"

    def test_set_locale(self, translator, resolver):
        """set_locale() switches the resolver's current language."""
        translator.set_locale("fr")
        assert translator.trans("greeting") == "Bonjour"
        assert resolver.current_language() == "fr"

    def test_set_locale_unknown(self, translator):
        """set_locale() rejects unknown languages."""
        with pytest.raises(InvalidLanguageError):
            translator.set_locale("de")

    def test_empty_message_uses_fallback_locale(self, translator):
        """An empty message falls back to the fallback locale."""
        assert translator.trans("menu.home", locale="fr") == "Home"

    def test_missing_message_returns_ident(self, translator):
        """A missing message returns its identifier."""
        assert translator.trans("missing.id") == "missing.id"
        assert not translator.has("missing.id")

    def test_has(self, translator):
        """has() checks the locale and domain."""
        assert translator.has("greeting")
        assert translator.has("greeting", locale="fr")
        assert not translator.has("greeting", domain="validators")

    def test_domains(self, translator):
        """Messages registered in a domain are only found there."""
        translator.add_resource({"required": "Ce champ est requis"}, "fr", domain="validators")
        assert translator.trans("required", domain="validators", locale="fr") == "Ce champ est requis"
        assert translator.trans("required", locale="fr") == "required"

    def test_interpolation(self, translator):
        """Both placeholder styles are filled from parameters."""
        assert translator.trans("welcome", {"name": "Ada"}) == "Welcome Ada"
        assert translator.trans("welcome", {"name": "Ada"}, locale="fr") == "Bienvenue Ada"

    def test_placeholders_kept_without_parameters(self, translator):
        """Placeholders are left alone when no parameters are passed."""
        assert translator.trans("welcome") == "Welcome {{name}}"

    def test_missing_parameter_raises(self, translator):
        """A placeholder without a parameter raises."""
        with pytest.raises(InvalidArgumentError):
            translator.trans("welcome", {})

    def test_available_locales(self, translator):
        """available_locales() lists the registered locales."""
        assert translator.available_locales() == ["en", "fr"]


@pytest.mark.unit
class TestTranslatorValues:
    """Tests for translating strings, mappings and TranslationValues."""

    @pytest.fixture
    def translator(self, resolver):
        translator = Translator(resolver)
        translator.add_resource({"Save": "Enregistrer"}, "fr")
        return translator

    def test_translation_fills_missing_languages(self, translator):
        """translation() adds messages for missing languages."""
        value = translator.translation({"en": "Save"})
        assert value.all() == {"en": "Save", "fr": "Enregistrer"}

    def test_translation_replaces_source_copies(self, translator):
        """A bare string is translated into every language."""
        value = translator.translation("Save")
        assert value.all() == {"en": "Save", "fr": "Enregistrer"}

    def test_translation_keeps_existing_values(self, translator, resolver):
        """Existing translations are not overwritten."""
        value = translator.translation(TranslationValue({"en": "Save", "fr": "Sauver"}, resolver))
        assert value.value("fr") == "Sauver"

    @pytest.mark.parametrize("val", [None, "", "  ", {}, 42])
    def test_translation_not_translatable(self, translator, val):
        """Values that are not translatable return None."""
        assert translator.translation(val) is None

    def test_translate(self, translator, resolver):
        """translate() returns the text in the current language."""
        assert translator.translate("Save") == "Save"
        resolver.languages.set_current_language("fr")
        assert translator.translate("Save") == "Enregistrer"
        assert translator.translate({"en": "Save"}) == "Enregistrer"
        assert translator.translate(None) == ""
