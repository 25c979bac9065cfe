import pytest

from newsfinder.exceptions import ValidationError
from newsfinder.news.services.query_sanitizer import canonicalize, extract_keywords, sanitize


class TestSanitize:
    def test_strips_punctuation_and_lowercases(self):
        query = sanitize("  Bitcoin,   PRICE!! ")

        assert query.canonical_text == "bitcoin price"
        assert query.keywords == ("bitcoin", "price")
        assert query.raw_text == "  Bitcoin,   PRICE!! "

    def test_punctuation_separates_tokens(self):
        query = sanitize("covid-19 vaccine/news")

        assert query.canonical_text == "covid 19 vaccine news"
        assert query.keywords == ("covid", "vaccine", "news")

    def test_short_tokens_are_not_keywords(self):
        query = sanitize("AI is on the rise")

        assert query.canonical_text == "ai is on the rise"
        assert query.keywords == ("the", "rise")

    def test_keywords_are_deduplicated(self):
        query = sanitize("Bitcoin bitcoin BITCOIN")

        assert query.canonical_text == "bitcoin bitcoin bitcoin"
        assert query.keywords == ("bitcoin",)

    def test_underscores_are_treated_as_punctuation(self):
        assert canonicalize("hello_world") == "hello world"

    def test_only_short_tokens_leaves_no_keywords(self):
        query = sanitize("AI vs ML")

        assert query.canonical_text == "ai vs ml"
        assert query.keywords == ()

    @pytest.mark.parametrize("raw", ["", "   ", "!!!", "?! ... --- ***", "\t\n", None])
    def test_empty_after_normalization_is_rejected(self, raw):
        with pytest.raises(ValidationError):
            sanitize(raw)

    @pytest.mark.parametrize("raw", [
        "Elon Musk's $44B Twitter deal!",
        "café – crème brûlée",
        "NASA@Mars #2024",
    ])
    def test_keywords_are_lowercase_alphanumeric_and_long(self, raw):
        for keyword in sanitize(raw).keywords:
            assert len(keyword) > 2
            assert keyword == keyword.lower()
            assert keyword.isalnum()
            assert keyword.isascii()


def test_extract_keywords_keeps_first_occurrence_order():
    assert extract_keywords("war peace war art") == ("war", "peace", "art")
