"""Relevance scoring of blog posts against a user question."""

from __future__ import annotations

from collections.abc import Collection

from bzr.models import BlogPost

# Whole-question phrase bonuses
TITLE_PHRASE_WEIGHT = 0.7
CONTENT_PHRASE_WEIGHT = 0.5
EXCERPT_PHRASE_WEIGHT = 0.6

# Per-keyword bonuses
TITLE_KEYWORD_WEIGHT = 0.3
TAG_KEYWORD_WEIGHT = 0.2
CATEGORY_KEYWORD_WEIGHT = 0.2
CONTENT_KEYWORD_WEIGHT = 0.1

_PHRASE_MAX = TITLE_PHRASE_WEIGHT + CONTENT_PHRASE_WEIGHT + EXCERPT_PHRASE_WEIGHT
_KEYWORD_MAX = (
    TITLE_KEYWORD_WEIGHT + TAG_KEYWORD_WEIGHT + CATEGORY_KEYWORD_WEIGHT + CONTENT_KEYWORD_WEIGHT
)


def raw_relevance(post: BlogPost, keywords: Collection[str], raw_query: str) -> float:
    """Unnormalized weighted sum of phrase and keyword matches."""
    title = post.title.lower()
    content = post.content.lower()
    excerpt = (post.excerpt or "").lower()
    category = (post.category or "").lower()
    tags = [tag.lower() for tag in post.tags or []]
    phrase = raw_query.lower()

    score = 0.0
    if phrase in title:
        score += TITLE_PHRASE_WEIGHT
    if phrase in content:
        score += CONTENT_PHRASE_WEIGHT
    if phrase in excerpt:
        score += EXCERPT_PHRASE_WEIGHT

    for keyword in keywords:
        if keyword in title:
            score += TITLE_KEYWORD_WEIGHT
        if any(keyword in tag for tag in tags):
            score += TAG_KEYWORD_WEIGHT
        if keyword in category:
            score += CATEGORY_KEYWORD_WEIGHT
        if keyword in content:
            score += CONTENT_KEYWORD_WEIGHT

    return score


def max_possible_score(keyword_count: int) -> float:
    return _PHRASE_MAX + keyword_count * _KEYWORD_MAX


def compute_relevance(post: BlogPost, keywords: Collection[str], raw_query: str) -> float:
    """Relevance score of a post for a question (0.0 to 1.0).

    Weights favour the title over tags and category, and those over the body.
    The denominator is a loose bound, so real scores rarely approach 1.0.
    """
    score = raw_relevance(post, keywords, raw_query)
    return min(score / max(1, max_possible_score(len(keywords))), 1.0)
