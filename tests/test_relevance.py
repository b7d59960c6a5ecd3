"""
Tests for search/relevance.py - weighted relevance scoring.
"""

import pytest

from bzr.search.relevance import (
    TITLE_KEYWORD_WEIGHT,
    TITLE_PHRASE_WEIGHT,
    compute_relevance,
    max_possible_score,
    raw_relevance,
)


class TestRawRelevance:

    def test_title_phrase_and_keywords(self, make_post):
        post = make_post(title="Procena rizika")
        score = raw_relevance(post, {"procena", "rizika"}, "procena rizika")
        assert score == pytest.approx(TITLE_PHRASE_WEIGHT + 2 * TITLE_KEYWORD_WEIGHT)

    def test_no_match_is_zero(self, unrelated_post):
        assert raw_relevance(unrelated_post, {"procena", "rizika"}, "procena rizika") == 0

    def test_title_phrase_increases_score(self, make_post):
        keywords = {"oprema"}
        with_phrase = make_post(title="Zaštitna oprema za rad")
        without_phrase = make_post(title="Oprema zaštitna za rad")
        assert raw_relevance(with_phrase, keywords, "zaštitna oprema") > raw_relevance(
            without_phrase, keywords, "zaštitna oprema"
        )

    def test_tag_substring_matches(self, make_post):
        post = make_post(title="X", tags=["lična zaštitna oprema"])
        assert raw_relevance(post, {"oprema"}, "nešto drugo") == pytest.approx(0.2)

    def test_tag_counted_once_per_keyword(self, make_post):
        post = make_post(title="X", tags=["oprema", "zaštitna oprema", "oprema za rad"])
        assert raw_relevance(post, {"oprema"}, "nešto drugo") == pytest.approx(0.2)

    def test_category_and_content(self, make_post):
        post = make_post(title="X", content="Obuka zaposlenih", category="obuka")
        assert raw_relevance(post, {"obuka"}, "nešto drugo") == pytest.approx(0.3)

    def test_case_insensitive(self, make_post):
        post = make_post(title="PROCENA RIZIKA")
        assert raw_relevance(post, {"procena"}, "Procena Rizika") == pytest.approx(1.0)

    def test_missing_excerpt_and_tags(self, make_post):
        post = make_post(title="Obuka", excerpt=None, tags=[])
        assert raw_relevance(post, {"obuka"}, "obuka") == pytest.approx(1.0)


class TestComputeRelevance:

    def test_max_possible_score(self):
        assert max_possible_score(0) == pytest.approx(1.8)
        assert max_possible_score(2) == pytest.approx(3.4)

    def test_full_match_scores_one(self, risk_post):
        score = compute_relevance(risk_post, {"procena", "rizika"}, "procena rizika")
        assert score == pytest.approx(1.0)
        assert score > 0.5

    def test_title_only_match_is_partial(self, make_post):
        post = make_post(title="Procena rizika")
        score = compute_relevance(post, {"procena", "rizika"}, "procena rizika")
        assert score == pytest.approx(1.3 / 3.4)
        assert 0.3 <= score < 0.5

    def test_unrelated_post_scores_zero(self, unrelated_post):
        assert compute_relevance(unrelated_post, {"procena", "rizika"}, "procena rizika") == 0

    def test_empty_keywords_still_scores_phrase(self, make_post):
        post = make_post(title="i u na")
        score = compute_relevance(post, set(), "i u na")
        assert score == pytest.approx(0.7 / 1.8)

    def test_empty_post(self, make_post):
        post = make_post(title="", content="", excerpt="", category="", tags=[])
        assert compute_relevance(post, {"obuka"}, "obuka") == 0

    def test_empty_query_matches_every_phrase_field(self, make_post):
        post = make_post(title="Bilo šta", content="tekst", excerpt="izvod")
        assert compute_relevance(post, set(), "") == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "title,content,keywords,query",
        [
            ("Obuka obuka obuka", "obuka " * 50, {"obuka"}, "obuka"),
            ("Procena rizika", "", {"procena", "rizika"}, "procena rizika"),
            ("", "", {"zakon", "kazne", "prekršaj"}, "zakon kazne prekršaj"),
            ("Zakon", "zakon", set(), "zakon"),
        ],
    )
    def test_score_bounded(self, make_post, title, content, keywords, query):
        post = make_post(title=title, content=content, tags=[query], category=query)
        score = compute_relevance(post, keywords, query)
        assert 0.0 <= score <= 1.0
