"""Unit tests for language.manager.LanguageManager."""

import pytest

from charcoal_translation.core.config import LocalesSettings, TranslationsSettings
from charcoal_translation.core.errors import InvalidLanguageError, NotConfiguredError
from charcoal_translation.language import DEFAULT_INDEX_PATH, LanguageRecord, LanguageRepository
from charcoal_translation.language.manager import LanguageManager, active_languages


class RecordingApplier:
    """LocaleApplier stand-in that records the languages it applied."""

    def __init__(self):
        self.applied = []

    def apply(self, resolver):
        self.applied.append(resolver.current_language())
        return resolver.current_language()


@pytest.fixture
def locales():
    return LocalesSettings(
        LANGUAGES={
            "en": {"name": "English"},
            "fr": {"name": "Français"},
            "de": {"name": "Deutsch", "active": False},
        },
        DEFAULT_LANGUAGE="en",
        FALLBACK_LANGUAGES=["en"],
    )


@pytest.fixture
def translations(translations_dir):
    return TranslationsSettings(
        PATHS=["translations"],
        MESSAGES={"app.title": {"en": "Charcoal", "fr": "Charbon"}},
    )


@pytest.fixture
def manager(tmp_path, locales, translations):
    return LanguageManager(
        repository=LanguageRepository([DEFAULT_INDEX_PATH]),
        base_path=tmp_path,
    ).setup(locales, translations)


@pytest.mark.unit
class TestActiveLanguages:
    """Tests for active_languages."""

    def test_normalizes_and_drops_inactive(self):
        """Bare names become mappings and inactive languages are dropped."""
        assert active_languages(
            {"en": "English", "fr": {"active": False}, "es": None}
        ) == {"en": {"name": "English"}, "es": {}}

    def test_accepts_records(self):
        """LanguageRecord values are converted to mappings."""
        data = active_languages({"ar": LanguageRecord("ar", direction="rtl")})
        assert data["ar"]["direction"] == "rtl"


@pytest.mark.unit
class TestLanguageManagerSetup:
    """Tests for LanguageManager.setup."""

    def test_not_configured(self):
        """Accessors raise NotConfiguredError before setup()."""
        manager = LanguageManager()
        with pytest.raises(NotConfiguredError):
            manager.translation()
        with pytest.raises(NotConfiguredError):
            manager.catalog()
        with pytest.raises(NotConfiguredError):
            manager.translator()

    def test_inactive_languages_skipped(self, manager):
        """Inactive languages are not made available."""
        assert manager.available_languages() == ["en", "fr"]
        assert manager.default_language() == "en"
        assert manager.current_language() == "en"
        assert manager.fallback_languages() == ["en"]

    def test_index_data_merged_under_configuration(self, manager):
        """Configured fields override the language index."""
        french = manager.language("fr")
        assert french.locale == "fr-FR"
        assert french.name == "Français"

    def test_defaults_without_settings(self):
        """setup() without settings uses English and French."""
        manager = LanguageManager().setup()
        assert manager.available_languages() == ["en", "fr"]
        assert len(manager.catalog()) == 0

    def test_current_language_from_settings(self, locales):
        """CURRENT_LANGUAGE sets the current language."""
        locales.CURRENT_LANGUAGE = "fr"
        manager = LanguageManager().setup(locales)
        assert manager.current_language() == "fr"

    def test_invalid_default_language(self, locales):
        """An inactive default language raises."""
        locales.DEFAULT_LANGUAGE = "de"
        with pytest.raises(InvalidLanguageError):
            LanguageManager().setup(locales)


@pytest.mark.unit
class TestLanguageManagerTranslation:
    """Tests for catalog and translator wiring."""

    def test_catalog_from_resources_and_messages(self, manager):
        """The catalog holds resource files and inline messages."""
        catalog = manager.catalog()
        assert catalog.translate("greeting", "fr") == "Bonjour"
        assert catalog.translate("farewell", "fr") == "Au revoir"
        assert catalog.translate("menu.home", "fr") == "Accueil"
        assert catalog.translate("app.title", "fr") == "Charbon"

    def test_resources_outside_languages_excluded(self, manager):
        """Resources tagged with unavailable languages are not loaded."""
        assert "Inicio" not in manager.catalog().to_dict().get("menu.home", {}).values()

    def test_translate_falls_back_to_ident(self, manager):
        """translate() returns the identifier when nothing is found."""
        assert manager.translate("missing.id") == "missing.id"
        assert manager.translate("farewell") == "farewell"

    def test_translate_unknown_language_raises(self, manager):
        """translate() rejects unavailable languages."""
        with pytest.raises(InvalidLanguageError):
            manager.translate("greeting", "de")

    def test_translator_follows_current_language(self, manager):
        """The translator tracks the manager's current language."""
        translator = manager.translator()
        assert translator.trans("greeting") == "Hello"

        manager.set_current_language("fr")
        assert translator.trans("greeting") == "Bonjour"
        assert manager.translate("greeting") == "Bonjour"

    def test_translator_uses_fallback_languages(self, manager):
        """The translator falls back to FALLBACK_LANGUAGES."""
        manager.catalog().add_entry("only.english", {"en": "English only"})
        manager.translator().add_catalog(manager.catalog())
        assert manager.translator().trans("only.english", locale="fr") == "English only"


@pytest.mark.unit
class TestLanguageManagerCurrentLanguage:
    """Tests for current language changes and detection."""

    def test_set_current_language_applies_locale(self, locales):
        """set_current_language() calls the locale applier."""
        applier = RecordingApplier()
        manager = LanguageManager(locale_applier=applier).setup(locales)

        manager.set_current_language("fr")

        assert manager.current_language() == "fr"
        assert applier.applied == ["fr"]

    def test_set_current_language_without_applier(self, manager):
        """apply_locale() is a no-op without an applier."""
        assert manager.set_current_language("fr").apply_locale() is None

    def test_set_current_language_unknown(self, manager):
        """An unknown language leaves the current language unchanged."""
        with pytest.raises(InvalidLanguageError):
            manager.set_current_language("de")
        assert manager.current_language() == "en"

    def test_detect_language(self, manager):
        """detect_language() negotiates against available languages."""
        assert manager.detect_language("fr-CA,fr;q=0.9,en;q=0.5") == "fr"
        assert manager.detect_language("es") is None
