"""Tests for a11ykit.readability module."""

import pytest

from a11ykit.readability import (
    DEFAULT_WORD_LENGTH,
    LANGUAGES,
    Readability,
    SampleSizeError,
    ScoredItem,
)

GUM_TEXT = (
    "I went to sleep with gum in my mouth and now there's gum in my hair and when I got "
    "out of bed this morning I tripped on my skateboard and by mistake I dropped my "
    "sweater in the sink while the water was running and I could tell it was going to "
    "be a terrible, horrible, no good, very bad day. I think I'll move to Australia."
)

COUNTRY_TEXT = "Now is the time for all good men to come to the aid of their country"


class TestConstruction:
    """Test the constructor argument forms."""

    def test_config_mapping(self):
        """Test text and lang from a mapping."""
        scorer = Readability({"text": "Drink this medicine, please. Thank you", "lang": "en"})
        assert scorer.item(0).lix == 36
        assert scorer.lang == "en"

    def test_language_overrides_size(self, drink_text):
        """Test a supported language wins over an explicit size."""
        assert Readability(drink_text, 3, "en").wlong == 6

    def test_language_as_second_argument(self, drink_text):
        """Test a language tag in the size position."""
        scorer = Readability(drink_text, "en")
        assert scorer.lang == "en"
        assert scorer.wlong == 6

    def test_size_argument(self, drink_text):
        """Test an explicit long word length."""
        assert Readability(drink_text, 3).wlong == 3

    def test_config_values(self):
        """Test every combination of mapping keys."""
        text = "Drink this medicine now, please."
        assert Readability({"lang": "es", "size": 4, "text": text}).lang == "es"
        assert Readability({"lang": "es", "size": 4}).lang == "es"
        assert Readability({"lang": "es", "text": text}).lang == "es"
        assert Readability({"size": 4, "text": text}).wlong == 4
        assert Readability({"size": 4, "text": text}).LIX == 65

    def test_langtag_keyword(self):
        """Test a language passed by keyword."""
        scorer = Readability(lang="vi")
        assert scorer.lang == "vi"
        assert scorer.wlong == 5

    def test_region_subtag_is_ignored(self):
        """Test a tag with a region."""
        scorer = Readability(lang="en-GB")
        assert scorer.lang == "en"


class TestScores:
    """Test LIX and OVIX scoring."""

    def test_string(self, drink_text):
        """Test a two sentence phrase."""
        assert Readability(drink_text).LIX == 36

    def test_string_list(self, drink_text):
        """Test the average over several phrases."""
        content = [
            "Tomar este medicina, por favor. Gracias.",
            drink_text,
            "Now is the time for all good men to come to the aid of their country.",
        ]
        assert Readability(content).LIX == 31

    def test_multi_sentence_phrase(self):
        """Test a long phrase scores without error."""
        scorer = Readability(GUM_TEXT)
        assert scorer.LIX == 50
        assert scorer.error is None

    def test_item(self, drink_text):
        """Test the counts of a scored item."""
        item = Readability(drink_text).item(0)
        assert isinstance(item, ScoredItem)
        assert item.phrase == drink_text
        assert item.words == 6
        assert item.long_words == 2
        assert item.sentences == 2
        assert item.lix == 36

    def test_ovix(self):
        """Test the word variation index."""
        item = Readability(COUNTRY_TEXT).item(0)
        assert item.ovix > 0
        assert item.ovix == round(item.ovix, 2)

    def test_ovix_without_repeats(self):
        """Test all unique words give an OVIX of 0."""
        item = Readability("One two three four five.").item(0)
        assert item.ovix == 0.0
        assert item.lix == 5


class TestSmallSamples:
    """Test content too small to score."""

    def test_missing_content(self):
        """Test no content."""
        scorer = Readability()
        assert scorer.LIX == 0
        assert scorer.OVIX == 0
        assert scorer.parsed == []

    def test_blank_content(self):
        """Test an empty string."""
        assert Readability("").LIX == 0

    def test_too_few_words(self):
        """Test fewer than five words records an error."""
        scorer = Readability({"text": "Drink this medicine"})
        assert scorer.LIX == 0
        assert isinstance(scorer.error, SampleSizeError)
        assert isinstance(scorer.error, ValueError)
        assert str(scorer.error) == "Sample size is too small: 3 words, 1 sentence"

    def test_error_is_cleared(self, drink_text):
        """Test rescoring clears a previous error."""
        scorer = Readability("Drink this medicine")
        scorer.score(drink_text)
        assert scorer.error is None


class TestSettings:
    """Test word length and language settings."""

    def test_default_word_length(self):
        """Test the default is the rounded mean across languages."""
        assert DEFAULT_WORD_LENGTH == 6
        assert Readability().wlong == 6

    def test_supported_language(self):
        """Test a language sets the word length."""
        scorer = Readability()
        scorer.lang = "pl"
        assert scorer.wlong == 7

    def test_unsupported_language(self):
        """Test an unknown language changes nothing."""
        scorer = Readability()
        scorer.lang = "zh"
        assert scorer.wlong == 6
        assert scorer.lang is None

    def test_non_numeric_word_length(self):
        """Test a non-numeric word length is ignored."""
        scorer = Readability()
        scorer.wlong = 10
        assert scorer.wlong == 10
        scorer.wlong = "foo"
        assert scorer.wlong == 10
        scorer.wlong = "8 characters"
        assert scorer.wlong == 8

    def test_languages(self):
        """Test the supported languages are listed by code."""
        languages = Readability().languages
        assert len(languages) == len(LANGUAGES) == 31
        assert languages[0] == {"code": "ar", "name": "Arabic"}
        assert languages[-1] == {"code": "vi", "name": "Vietnamese"}
        assert [language["code"] for language in languages] == sorted(LANGUAGES)


class TestScoreMethod:
    """Test rescoring."""

    def test_returns_self(self):
        """Test score is fluent."""
        scorer = Readability()
        assert scorer.score() is scorer

    def test_new_content(self):
        """Test scoring new content."""
        assert Readability().score(COUNTRY_TEXT).item(0).lix == 22

    def test_item_out_of_range(self):
        """Test indexing past the parsed phrases."""
        with pytest.raises(IndexError):
            Readability().item(0)
