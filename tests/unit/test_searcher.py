"""Unit tests for the Searcher facade against the reference excerpts."""

import pytest

from context_search.exceptions import InvalidArgumentError, InvalidInputError
from context_search.search.models import ContextMatch
from context_search.searcher import Searcher


SPECIES_CONTEXT_4 = [
    "on the Origin of Species.  Until recently the great",
    "of naturalists believed that species were immutable productions, and",
    "hand, have believed that species undergo modification, and that",
]


@pytest.mark.unit
class TestShortExcerpt:
    """Scenarios over the short Origin of Species excerpt."""

    def test_one_hit_no_context(self, short_searcher):
        assert short_searcher.search("sketch", 0) == ["sketch"]

    def test_multiple_hits_no_context(self, short_searcher):
        assert short_searcher.search("naturalists", 0) == ["naturalists", "naturalists"]

    def test_basic_search(self, short_searcher):
        assert short_searcher.search("naturalists", 3) == [
            "great majority of naturalists believed that species",
            "authors.  Some few naturalists, on the other",
        ]

    def test_more_context(self, short_searcher):
        assert short_searcher.search("naturalists", 6) == [
            "Until recently the great majority of naturalists believed that species were immutable productions",
            "maintained by many authors.  Some few naturalists, on the other hand, have believed",
        ]

    @pytest.mark.parametrize("query", ["species", "SPECIES", "SpEcIeS"])
    def test_case_insensitive_search(self, short_searcher, query):
        assert short_searcher.search(query, 4) == SPECIES_CONTEXT_4

    def test_zero_context_keeps_source_casing(self, short_searcher):
        assert short_searcher.search("species", 0) == ["Species", "species", "species"]

    def test_near_beginning(self, short_searcher):
        assert short_searcher.search("here", 4) == ["I will here give a brief sketch"]

    def test_near_end(self, short_searcher):
        assert short_searcher.search("existing", 3) == [
            "and that the existing forms of life",
            "generation of pre existing forms.",
        ]

    def test_overlapping_hits_come_back_separately(self, short_searcher):
        assert short_searcher.search("that", 3) == [
            "of naturalists believed that species were immutable",
            "hand, have believed that species undergo modification",
            "undergo modification, and that the existing forms",
        ]

    def test_multiple_searches_on_one_instance(self, short_searcher):
        assert short_searcher.search("species", 4) == SPECIES_CONTEXT_4
        assert short_searcher.search("here", 4) == ["I will here give a brief sketch"]
        assert short_searcher.search("existing", 3) == [
            "and that the existing forms of life",
            "generation of pre existing forms.",
        ]
        assert short_searcher.search("species", 4) == SPECIES_CONTEXT_4


@pytest.mark.unit
class TestLongExcerpt:
    """Scenarios over the long excerpt (CRLF line endings)."""

    def test_apostrophe_query(self, long_searcher):
        assert long_searcher.search("animal's", 4) == [
            "not indeed to the animal's or plant's own good",
            "habitually speak of an animal's organisation as\r\nsomething plastic",
        ]

    def test_numeric_query(self, long_searcher):
        assert long_searcher.search("1844", 2) == [
            "enlarged in 1844 into a",
            "sketch of 1844--honoured me",
        ]

    def test_mixed_query(self, long_searcher):
        assert long_searcher.search("xxxxx10x", 3) == ["date first edition [xxxxx10x.xxx] please check"]

    def test_no_hits(self, long_searcher):
        results = long_searcher.search("slejrlskejrlkajlsklejrlksjekl", 3)

        assert results is not None
        assert results == []


@pytest.mark.unit
class TestSearcherContract:
    def test_negative_context_raises(self, short_searcher):
        with pytest.raises(InvalidArgumentError):
            short_searcher.search("species", -1)

    def test_non_text_document_is_rejected(self):
        with pytest.raises(InvalidInputError):
            Searcher(b"bytes are not text")  # type: ignore[arg-type]

    def test_missing_file_is_rejected(self, tmp_path):
        with pytest.raises(InvalidInputError):
            Searcher.from_file(tmp_path / "missing.txt")

    def test_empty_document_has_no_hits(self):
        assert Searcher("").search("anything", 2) == []

    def test_custom_word_pattern(self):
        searcher = Searcher("123, 789: def", word_pattern="[0-9]+")

        assert searcher.search("789", 1) == ["123, 789: def"]
        assert searcher.search("def", 0) == []

    def test_search_matches_expose_offsets(self, short_searcher):
        matches = short_searcher.search_matches("sketch", 1)

        assert matches == [
            ContextMatch(word="sketch", context="brief sketch of", position=12, start_char=19, end_char=34)
        ]
        assert short_searcher.index.text[19:34] == "brief sketch of"

    def test_search_and_search_matches_agree(self, short_searcher):
        contexts = [m.context for m in short_searcher.search_matches("that", 2)]

        assert short_searcher.search("that", 2) == contexts

    def test_results_follow_document_order(self):
        searcher = Searcher("Beta alpha BETA gamma beta")

        matches = searcher.search_matches("beta", 0)

        assert [m.word for m in matches] == ["Beta", "BETA", "beta"]
        assert [m.start_char for m in matches] == sorted(m.start_char for m in matches)

    def test_identical_windows_are_not_deduplicated(self):
        searcher = Searcher("go go")

        assert searcher.search("go", 5) == ["go go", "go go"]

    def test_window_starts_at_first_word_when_document_opens_with_punctuation(self):
        assert Searcher("  -- hello world").search("hello", 3) == ["hello world"]
        assert Searcher('"Beagle" sailed').search("beagle", 2) == ['Beagle" sailed']

    def test_non_string_query_is_rejected(self, short_searcher):
        with pytest.raises(InvalidArgumentError):
            short_searcher.search(None, 1)  # type: ignore[arg-type]
