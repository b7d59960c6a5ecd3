"""Keyword extraction from user questions for blog relevance search."""

from __future__ import annotations

import re

# Common Serbian words that carry no search meaning
STOP_WORDS = frozenset(
    "i u na za sa od do je su koji šta kako da li ne to a ali ili".split()
)

# Short but meaningful BZR terms, kept regardless of length
BZR_KEYWORDS = frozenset(
    "bzr bezbednost zdravlje rad zakon pravilnik propisi rizik opasnost "
    "zaštita obuka instrukcije mere".split()
)

_PUNCTUATION = re.compile(r"[.,?!;:\"'()\[\]{}]")
_WHITESPACE = re.compile(r"\s+")


def normalize_query(query: str) -> str:
    """Lowercase, strip punctuation and collapse whitespace."""
    if not query:
        return ""
    cleaned = _PUNCTUATION.sub(" ", query.lower())
    return _WHITESPACE.sub(" ", cleaned).strip()


def extract_keywords(query: str) -> set[str]:
    """Extract the set of search keywords from a user question.

    A word is kept if it is longer than 3 characters and not a stop word,
    or if it is one of the BZR domain terms.

    Example:
        >>> sorted(extract_keywords("Procena rizika?"))
        ['procena', 'rizika']
    """
    normalized = normalize_query(query)
    if not normalized:
        return set()

    return {
        word
        for word in normalized.split(" ")
        if (len(word) > 3 and word not in STOP_WORDS) or word in BZR_KEYWORDS
    }
