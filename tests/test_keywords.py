"""
Tests for search/keywords.py - keyword extraction from user questions.
"""

import pytest

from bzr.search.keywords import BZR_KEYWORDS, STOP_WORDS, extract_keywords, normalize_query


class TestNormalizeQuery:

    def test_lowercases_and_strips_punctuation(self):
        assert normalize_query("Šta je (BZR)?!") == "šta je bzr"

    def test_collapses_whitespace(self):
        assert normalize_query("  procena \t\n rizika  ") == "procena rizika"

    def test_keeps_hyphens(self):
        assert normalize_query("e-mail") == "e-mail"

    def test_empty(self):
        assert normalize_query("") == ""


class TestExtractKeywords:

    def test_example_procena_rizika(self):
        assert extract_keywords("procena rizika") == {"procena", "rizika"}

    def test_all_stop_words_yield_empty_set(self):
        assert extract_keywords("i u na") == set()

    def test_empty_query(self):
        assert extract_keywords("") == set()

    def test_punctuation_only(self):
        assert extract_keywords("?!.,;") == set()

    def test_duplicates_removed(self):
        assert extract_keywords("Rizik rizik RIZIK, rizik?") == {"rizik"}

    def test_short_words_dropped(self):
        assert extract_keywords("ko ima pas") == set()

    def test_short_domain_terms_kept(self):
        assert extract_keywords("bzr i rad") == {"bzr", "rad"}

    def test_returns_lowercase_tokens(self):
        keywords = extract_keywords("OBAVEZE Poslodavca prema ZAKONU")
        assert keywords == {"obaveze", "poslodavca", "prema", "zakonu"}
        assert all(k == k.lower() for k in keywords)

    def test_returns_set(self):
        assert isinstance(extract_keywords("lična zaštitna oprema"), set)

    def test_cyrillic_words_are_kept(self):
        assert extract_keywords("Процена ризика") == {"процена", "ризика"}

    @pytest.mark.parametrize("word", sorted(STOP_WORDS - BZR_KEYWORDS))
    def test_single_stop_word_yields_nothing(self, word):
        assert extract_keywords(word) == set()

    @pytest.mark.parametrize("word", sorted(BZR_KEYWORDS))
    def test_single_domain_term_is_kept(self, word):
        assert extract_keywords(word.upper()) == {word}
