"""
Tests for search/blog_search.py - threshold search and two-pass selection.
"""

from bzr import db
from bzr.models import BlogStatus
from bzr.search.blog_search import (
    find_blog_posts_for_question,
    find_relevant_blog_posts,
    score_blog_posts,
)


def _strong(make_post, i):
    """Post matching 'procena rizika' everywhere (score 1.0)."""
    return make_post(
        title=f"Procena rizika deo {i}",
        content="Procena rizika u praksi.",
        excerpt="Ukratko o temi procena rizika.",
        slug=f"strong-{i}",
    )


def _partial(make_post, i):
    """Post matching 'procena rizika' in the title only (score ~0.38)."""
    return make_post(title=f"Procena rizika {i}", slug=f"partial-{i}")


def _failing_store():
    raise RuntimeError("database is locked")


class TestScoreBlogPosts:

    def test_sorted_descending(self, make_post, unrelated_post, risk_post):
        partial = _partial(make_post, 1)
        scored = score_blog_posts("procena rizika", [unrelated_post, partial, risk_post])
        assert [p for p, _ in scored] == [risk_post, partial, unrelated_post]
        scores = [s for _, s in scored]
        assert scores == sorted(scores, reverse=True)

    def test_empty_posts(self):
        assert score_blog_posts("procena rizika", []) == []


class TestFindRelevantBlogPosts:

    def test_filters_by_threshold(self, make_post, risk_post, unrelated_post):
        posts = [unrelated_post, _partial(make_post, 1), risk_post]
        result = find_relevant_blog_posts("procena rizika", 0.5, lambda: posts)
        assert result == [risk_post]

    def test_lower_threshold_includes_partial(self, make_post, risk_post, unrelated_post):
        partial = _partial(make_post, 1)
        result = find_relevant_blog_posts(
            "procena rizika", 0.3, lambda: [unrelated_post, partial, risk_post]
        )
        assert result == [risk_post, partial]

    def test_default_threshold_is_relaxed(self, make_post):
        partial = _partial(make_post, 1)
        assert find_relevant_blog_posts("procena rizika", fetch_posts=lambda: [partial]) == [partial]

    def test_no_matches(self, unrelated_post):
        assert find_relevant_blog_posts("procena rizika", 0.3, lambda: [unrelated_post]) == []

    def test_empty_store(self):
        assert find_relevant_blog_posts("procena rizika", 0.3, lambda: []) == []

    def test_store_failure_returns_empty(self):
        assert find_relevant_blog_posts("procena rizika", 0.3, _failing_store) == []

    def test_reads_published_posts_from_db(self, temp_db, risk_post):
        db.create_blog_post(risk_post)
        draft = risk_post.model_copy(
            update={"slug": "procena-rizika-nacrt", "status": BlogStatus.DRAFT}
        )
        db.create_blog_post(draft)

        result = find_relevant_blog_posts("procena rizika", 0.5)
        assert [p.slug for p in result] == ["procena-rizika-na-radnom-mestu"]

    def test_missing_table_returns_empty(self, tmp_path, monkeypatch):
        monkeypatch.setattr(db, "DB_PATH", tmp_path / "empty.db")
        assert find_relevant_blog_posts("procena rizika", 0.3) == []


class TestFindBlogPostsForQuestion:

    def test_strict_pass_sufficient(self, make_post):
        posts = [_strong(make_post, i) for i in range(4)]
        result, should_create = find_blog_posts_for_question("procena rizika", lambda: posts)
        assert len(result) == 4
        assert should_create is False

    def test_relaxed_pass_replaces_strict(self, make_post):
        strong = [_strong(make_post, i) for i in range(2)]
        partial = [_partial(make_post, i) for i in range(3)]
        result, should_create = find_blog_posts_for_question(
            "procena rizika", lambda: partial + strong
        )
        assert len(result) == 5
        assert result[:2] == strong
        assert should_create is False

    def test_neither_pass_keeps_strict_hits(self, make_post, unrelated_post):
        strong = _strong(make_post, 1)
        partial = _partial(make_post, 1)
        result, should_create = find_blog_posts_for_question(
            "procena rizika", lambda: [unrelated_post, partial, strong]
        )
        assert result == [strong]
        assert should_create is True

    def test_no_posts_requests_new_article(self):
        result, should_create = find_blog_posts_for_question("procena rizika", lambda: [])
        assert result == []
        assert should_create is True

    def test_store_failure_requests_new_article(self):
        result, should_create = find_blog_posts_for_question("procena rizika", _failing_store)
        assert result == []
        assert should_create is True

    def test_exactly_threshold_is_enough(self, make_post):
        posts = [_strong(make_post, i) for i in range(3)]
        result, should_create = find_blog_posts_for_question("procena rizika", lambda: posts)
        assert len(result) == 3
        assert should_create is False
