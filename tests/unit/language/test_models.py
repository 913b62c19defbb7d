"""Unit tests for language.models."""

import pytest

from charcoal_translation.core.errors import InvalidArgumentError
from charcoal_translation.language.models import (
    UNDETERMINED,
    Direction,
    LanguageRecord,
    resolve_language_ident,
)


@pytest.mark.unit
class TestDirection:
    """Tests for Direction."""

    def test_from_value_is_case_insensitive(self):
        """from_value() accepts any case and Direction members."""
        assert Direction.from_value("RTL") is Direction.RTL
        assert Direction.from_value(Direction.LTR) is Direction.LTR

    def test_from_value_invalid(self):
        """from_value() rejects unknown directions."""
        with pytest.raises(InvalidArgumentError):
            Direction.from_value("up")


@pytest.mark.unit
class TestLanguageRecord:
    """Tests for LanguageRecord."""

    def test_locale_defaults_to_ident(self):
        """A bare record uses its ident as locale and is active LTR."""
        record = LanguageRecord("fr")
        assert record.locale == "fr"
        assert record.direction is Direction.LTR
        assert record.active is True

    def test_empty_ident_raises(self):
        """An empty ident is rejected."""
        with pytest.raises(InvalidArgumentError):
            LanguageRecord("")

    def test_from_dict_keeps_unknown_keys(self):
        """from_dict() stores unknown keys in extra."""
        record = LanguageRecord.from_dict(
            {"name": "Français", "locale": "fr-CA", "direction": "ltr", "flag": "ca"},
            ident="fr",
        )
        assert record.ident == "fr"
        assert record.locale == "fr-CA"
        assert record.extra == {"flag": "ca"}

    def test_from_dict_ident_key_wins(self):
        """An ident key in the data overrides the ident argument."""
        record = LanguageRecord.from_dict({"ident": "he", "direction": "rtl"}, ident="xx")
        assert record.ident == "he"
        assert record.direction is Direction.RTL

    def test_code_is_language_part_of_locale(self):
        """code is the language part of the locale."""
        assert LanguageRecord("fr", locale="fr_CA").code == "fr"
        assert LanguageRecord("pt", locale="pt-BR").code == "pt"

    def test_display_name(self):
        """display_name() falls back from the asked language to the first name, then the ident."""
        record = LanguageRecord("fr", name={"en": "French", "fr": "Français"})
        assert record.display_name("fr") == "Français"
        assert record.display_name("de") == "French"
        assert LanguageRecord("xx").display_name() == "xx"

    def test_is_special(self):
        """Undetermined and similar idents are special."""
        assert LanguageRecord(UNDETERMINED).is_special
        assert not LanguageRecord("en").is_special

    def test_to_dict(self):
        """to_dict() flattens extra keys next to the known fields."""
        record = LanguageRecord("ar", name="Arabic", direction="rtl", extra={"flag": "sa"})
        assert record.to_dict() == {
            "ident": "ar",
            "name": "Arabic",
            "direction": "rtl",
            "locale": "ar",
            "active": True,
            "flag": "sa",
        }
        assert str(record) == "ar"


@pytest.mark.unit
class TestResolveLanguageIdent:
    """Tests for resolve_language_ident."""

    def test_accepts_string_record_and_mapping(self):
        """Strings, records and mappings with ident resolve to the ident."""
        assert resolve_language_ident("fr") == "fr"
        assert resolve_language_ident(LanguageRecord("fr")) == "fr"
        assert resolve_language_ident({"ident": "fr", "name": "Français"}) == "fr"

    @pytest.mark.parametrize("value", [42, None, {"name": "Français"}, ["fr"]])
    def test_rejects_other_values(self, value):
        """Other values raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            resolve_language_ident(value)
