"""
Pytest configuration and shared fixtures.
"""

import pytest

from bzr import config, db
from bzr.models import BlogPost, BlogStatus


@pytest.fixture(autouse=True)
def no_llm_keys(monkeypatch):
    """Tests never talk to real LLM providers unless they opt in."""
    monkeypatch.setattr(config, "GEMINI_API_KEY", "")
    monkeypatch.setattr(config, "ANTHROPIC_API_KEY", "")
    monkeypatch.setattr(config, "OPENROUTER_API_KEY", "")


@pytest.fixture
def temp_db(tmp_path, monkeypatch):
    """Fresh SQLite database in a temp directory."""
    db_path = tmp_path / "data" / "test.db"
    monkeypatch.setattr(db, "DB_PATH", db_path)
    db.init_db()
    return db_path


@pytest.fixture
def make_post():
    """Factory for in-memory blog posts."""

    def _make(
        title: str = "Naslov",
        content: str = "",
        excerpt: str | None = None,
        category: str = "general",
        tags: list[str] | None = None,
        slug: str = "",
        status: BlogStatus = BlogStatus.PUBLISHED,
    ) -> BlogPost:
        return BlogPost(
            title=title,
            slug=slug or title.lower().replace(" ", "-"),
            content=content,
            excerpt=excerpt,
            category=category,
            tags=tags or [],
            status=status,
        )

    return _make


@pytest.fixture
def risk_post(make_post) -> BlogPost:
    """Post that matches 'procena rizika' in every field."""
    return make_post(
        title="Procena rizika na radnom mestu",
        content="Procena rizika je obaveza svakog poslodavca prema zakonu.",
        excerpt="Vodič kroz procena rizika korak po korak.",
        category="procena-rizika",
        tags=["procena rizika", "opasnosti"],
        slug="procena-rizika-na-radnom-mestu",
    )


@pytest.fixture
def unrelated_post(make_post) -> BlogPost:
    return make_post(
        title="Godišnji odmor i praznici",
        content="Pravo na godišnji odmor stiče se nakon mesec dana rada.",
        category="radni-odnosi",
        tags=["odmor"],
        slug="godisnji-odmor",
    )
