"""Search for published blog posts relevant to a user question.

Used by the AI agent to decide whether existing articles already cover a
question or a new article should be drafted from the AI answer.
"""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from bzr import db
from bzr.config import (
    BLOG_POST_THRESHOLD,
    DEFAULT_MIN_RELEVANCE_SCORE,
    HIGH_RELEVANCE_SCORE,
    RELAXED_RELEVANCE_SCORE,
)
from bzr.models import BlogPost, BlogStatus
from bzr.search.keywords import extract_keywords
from bzr.search.relevance import compute_relevance

PostFetcher = Callable[[], list[BlogPost]]


def _published_posts() -> list[BlogPost]:
    return db.get_blog_posts_by_status(BlogStatus.PUBLISHED)


def score_blog_posts(query: str, posts: list[BlogPost]) -> list[tuple[BlogPost, float]]:
    """Score every post for the query, best first."""
    keywords = extract_keywords(query)
    logger.debug("Extracted keywords: {}", ", ".join(sorted(keywords)))

    scored = [(post, compute_relevance(post, keywords, query)) for post in posts]
    scored.sort(key=lambda item: item[1], reverse=True)
    return scored


def find_relevant_blog_posts(
    query: str,
    min_relevance_score: float = DEFAULT_MIN_RELEVANCE_SCORE,
    fetch_posts: PostFetcher | None = None,
) -> list[BlogPost]:
    """Return published posts scoring at least min_relevance_score, best first.

    Never raises: a failing store is logged and treated as "nothing found".
    """
    fetch = fetch_posts or _published_posts
    try:
        logger.info("Searching relevant blog posts for: \"{}\"", query)
        posts = fetch()
        if not posts:
            logger.info("No published blog posts to search")
            return []

        logger.debug("Scoring {} published blog posts", len(posts))
        relevant = [
            post
            for post, score in score_blog_posts(query, posts)
            if score >= min_relevance_score
        ]
        logger.info(
            "Found {} relevant blog posts with score >= {}",
            len(relevant),
            min_relevance_score,
        )
        return relevant
    except Exception as e:
        logger.error("Blog post search failed: {}", e)
        return []


def find_blog_posts_for_question(
    query: str,
    fetch_posts: PostFetcher | None = None,
) -> tuple[list[BlogPost], bool]:
    """Find existing articles for a question and decide if a new one is needed.

    Returns (posts, should_create_blog_post). A strict pass runs first; when it
    finds fewer than BLOG_POST_THRESHOLD posts a relaxed pass replaces it if
    the relaxed pass reaches the threshold. Otherwise the strict hits are kept
    and a new post is requested.
    """
    strict = find_relevant_blog_posts(query, HIGH_RELEVANCE_SCORE, fetch_posts)
    logger.info("{} highly relevant blog posts", len(strict))
    if len(strict) >= BLOG_POST_THRESHOLD:
        return strict, False

    relaxed = find_relevant_blog_posts(query, RELAXED_RELEVANCE_SCORE, fetch_posts)
    logger.info("{} partially relevant blog posts", len(relaxed))
    if len(relaxed) >= BLOG_POST_THRESHOLD:
        return relaxed, False

    logger.info("Not enough relevant blog posts, a new one should be created")
    return strict, True
