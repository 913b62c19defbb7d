"""Unit tests for language.negotiation."""

import pytest

from charcoal_translation.language import LanguageNegotiator, parse_accept_language


@pytest.mark.unit
class TestParseAcceptLanguage:
    """Tests for parse_accept_language."""

    def test_sorted_by_quality(self):
        """Languages are ordered by descending quality."""
        assert parse_accept_language("en;q=0.8,fr-CA,fr;q=0.9") == [
            ("fr-CA", 1.0),
            ("fr", 0.9),
            ("en", 0.8),
        ]

    def test_zero_quality_dropped(self):
        """Languages with q=0 are dropped."""
        assert parse_accept_language("fr, en;q=0") == [("fr", 1.0)]

    def test_invalid_quality_defaults_to_one(self):
        """An unparseable quality counts as 1.0."""
        assert parse_accept_language("fr;q=high") == [("fr", 1.0)]

    @pytest.mark.parametrize("header", [None, "", " , "])
    def test_empty(self, header):
        """Empty headers yield no languages."""
        assert parse_accept_language(header) == []


@pytest.mark.unit
class TestLanguageNegotiator:
    """Tests for LanguageNegotiator."""

    def test_matches_language(self):
        """matches_language() compares case and separator insensitively."""
        assert LanguageNegotiator.matches_language("en_US", "en-us", strict=True)
        assert LanguageNegotiator.matches_language("fr-CA", "fr")
        assert not LanguageNegotiator.matches_language("fr-CA", "fr", strict=True)

    def test_exact_match_wins(self):
        """An exact tag match is preferred over a language match."""
        match = LanguageNegotiator.find_best_match(["en-US"], ["en", "en-US"])
        assert match == "en-US"

    def test_language_only_match(self):
        """A regional tag matches its base language."""
        assert LanguageNegotiator.find_best_match(["fr-CA"], ["en", "fr"]) == "fr"

    def test_wildcard(self):
        """The wildcard picks the first available language."""
        assert LanguageNegotiator.find_best_match(["*"], ["en", "fr"]) == "en"

    def test_no_match_returns_default(self):
        """Without a match the default is returned."""
        assert LanguageNegotiator.find_best_match(["de"], ["en", "fr"], default="en") == "en"
        assert LanguageNegotiator.find_best_match(["de"], ["en", "fr"]) is None

    def test_negotiate_header(self):
        """negotiate() parses the header and finds the best match."""
        negotiator = LanguageNegotiator()
        assert negotiator.negotiate("de-DE,fr;q=0.9,en;q=0.8", ["en", "fr"]) == "fr"
        assert negotiator.negotiate(None, ["en", "fr"], default="en") == "en"
