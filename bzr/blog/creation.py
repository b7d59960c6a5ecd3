"""Turn AI assistant answers into blog posts awaiting admin approval."""

from __future__ import annotations

import random
import re
from typing import Optional

from loguru import logger

from bzr import db
from bzr.blog.slug import generate_slug, generate_unique_slug
from bzr.config import CALL_TO_ACTION, DEFAULT_BLOG_TAGS, EXCERPT_MAX_LENGTH
from bzr.models import BlogPost, BlogStatus

TITLE_PREFIXES = (
    "Vodič: ",
    "Ključno za znati: ",
    "Stručni savet: ",
    "Važno za bezbednost: ",
    "Kako pravilno: ",
)

CATEGORY_IMAGES = {
    "bezbednost": "https://images.unsplash.com/photo-1599059813005-11265ba4b4ce?q=80&w=800",
    "regulative": "https://images.unsplash.com/photo-1589391886645-d51941baf7fb?q=80&w=800",
    "zaštita-zdravlja": "https://images.unsplash.com/photo-1576091160550-2173dba999ef?q=80&w=800",
    "procedure": "https://images.unsplash.com/photo-1507925921958-8a62f3d1a50d?q=80&w=800",
    "procena-rizika": "https://images.unsplash.com/photo-1454165804606-c3d57bc86b40?q=80&w=800",
    "obuke-zaposlenih": "https://images.unsplash.com/photo-1515187029135-18ee286d815b?q=80&w=800",
    "novosti": "https://images.unsplash.com/photo-1504711434969-e33886168f5c?q=80&w=800",
    "saveti": "https://images.unsplash.com/photo-1521790361543-f645cf042ec4?q=80&w=800",
    "propisi": "https://images.unsplash.com/photo-1589829545856-d10d557cf95f?q=80&w=800",
    "general": "https://images.unsplash.com/photo-1590402494610-2c378a9114c6?q=80&w=800",
}

_SENTENCE_END = re.compile(r"(?<=[.!?])\s+")


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def generate_blog_title(question: str) -> str:
    """Short questions become the title; long ones are condensed to key words."""
    words = question.split(" ")
    if len(words) <= 8:
        return _capitalize_first(question)

    title = _capitalize_first(" ".join([w for w in words if len(w) > 3][:5]))
    if len(title) < 20:
        title = random.choice(TITLE_PREFIXES) + title
    return title


def create_excerpt(text: str, max_length: int = EXCERPT_MAX_LENGTH) -> str:
    """Short summary cut on sentence boundaries where possible."""
    if len(text) <= max_length:
        return text

    sentences = _SENTENCE_END.split(text)
    excerpt = sentences[0]
    i = 1
    while len(excerpt) < 100 and i < len(sentences):
        excerpt += " " + sentences[i]
        i += 1

    if len(excerpt) < 50:
        return text[:max_length] + "..."
    if len(excerpt) > max_length:
        return excerpt[:max_length] + "..."
    return excerpt + "..."


def image_for_category(category: str) -> str:
    return CATEGORY_IMAGES.get(category, CATEGORY_IMAGES["general"])


def create_blog_from_ai_response(
    original_question: str,
    ai_response: str,
    user_id: Optional[int] = None,
    category: str = "general",
    tags: Optional[list[str]] = None,
) -> BlogPost:
    """Draft a blog post from an AI answer. The post needs admin approval."""
    title = generate_blog_title(original_question)
    slug = generate_unique_slug(generate_slug(title), db.get_all_slugs())

    post = BlogPost(
        title=title,
        slug=slug,
        content=ai_response,
        excerpt=create_excerpt(ai_response),
        image_url=image_for_category(category),
        category=category,
        tags=[*(tags or []), *DEFAULT_BLOG_TAGS],
        author_id=user_id,
        original_question=original_question,
        call_to_action=CALL_TO_ACTION,
        status=BlogStatus.PENDING_APPROVAL,
    )
    created = db.create_blog_post(post)
    logger.info("Blog post drafted from AI answer: id={} '{}'", created.id, title)
    return created
