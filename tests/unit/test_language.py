"""Tests for LanguageTag parsing and canonical rendering."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

import s2common
from s2common.core.language import SYSTEM_LANGUAGE, LanguageTag
from s2common.exceptions import BadFormatError


class TestParse:
    def test_language_region(self):
        tag = LanguageTag.parse("en-GB")
        assert tag.language == "en"
        assert tag.region == "GB"
        assert tag.variant == ""
        assert tag.canonical_text() == "en-GB"

    @pytest.mark.parametrize("text", ["en", "en-GB", "es-ES-Traditional"])
    def test_round_trip(self, text):
        assert LanguageTag.parse(text).canonical_text() == text

    def test_three_parts(self):
        tag = LanguageTag.parse("ja-JP-JP")
        assert (tag.language, tag.region, tag.variant) == ("ja", "JP", "JP")

    def test_too_many_parts_rejected(self):
        with pytest.raises(BadFormatError):
            LanguageTag.parse("a-b-c-d")

    @pytest.mark.parametrize("text", ["", "-GB", "en-", "en--x"])
    def test_empty_subtag_rejected(self, text):
        with pytest.raises(BadFormatError):
            LanguageTag.parse(text)


class TestFromParts:
    def test_arities(self):
        assert LanguageTag.from_parts("fr").canonical_text() == "fr"
        assert LanguageTag.from_parts("fr", "CA").canonical_text() == "fr-CA"
        assert LanguageTag.from_parts("fr", "CA", "x").canonical_text() == "fr-CA-x"

    def test_equal_to_parsed(self):
        assert LanguageTag.from_parts("en", "GB") == LanguageTag.parse("en-GB")
        assert hash(LanguageTag.from_parts("en", "GB")) == hash(LanguageTag.parse("en-GB"))

    def test_variant_without_region_is_an_error(self):
        with pytest.raises(ValueError):
            LanguageTag.from_parts("en", "", "x")

    @pytest.mark.parametrize("parts", [("en-GB",), ("en", "GB-x"), ("en", "GB", "a-b")])
    def test_dash_inside_subtag_is_an_error(self, parts):
        with pytest.raises(ValueError):
            LanguageTag.from_parts(*parts)

    def test_missing_language_is_an_error(self):
        with pytest.raises(ValueError):
            LanguageTag.from_parts("", "GB")

    def test_equal_text_means_equal_tags(self):
        built = LanguageTag.from_parts("es", "ES", "Traditional")
        parsed = LanguageTag.parse(built.canonical_text())
        assert built == parsed
        assert hash(built) == hash(parsed)


class TestLocale:
    def test_locale_name(self):
        assert LanguageTag.parse("en-GB").locale == "en_GB"
        assert LanguageTag.parse("en").locale == "en"

    def test_str_is_canonical(self):
        assert str(LanguageTag.parse("de-AT")) == "de-AT"

    def test_system_language(self):
        assert SYSTEM_LANGUAGE.canonical_text() == "en"
        assert s2common.SYSTEM_LANGUAGE is SYSTEM_LANGUAGE

    def test_frozen(self):
        with pytest.raises(ValidationError):
            SYSTEM_LANGUAGE.language = "fr"
