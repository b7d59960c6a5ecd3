"""URL slugs for blog posts (Serbian Cyrillic and Latin titles)."""

from __future__ import annotations

import re

from bzr.config import SLUG_MAX_LENGTH

_CYRILLIC_TO_LATIN = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "ђ": "dj", "е": "e",
    "ж": "z", "з": "z", "и": "i", "ј": "j", "к": "k", "л": "l", "љ": "lj",
    "м": "m", "н": "n", "њ": "nj", "о": "o", "п": "p", "р": "r", "с": "s",
    "т": "t", "ћ": "c", "у": "u", "ф": "f", "х": "h", "ц": "c", "ч": "c",
    "џ": "dz", "ш": "s",
    "А": "A", "Б": "B", "В": "V", "Г": "G", "Д": "D", "Ђ": "Dj", "Е": "E",
    "Ж": "Z", "З": "Z", "И": "I", "Ј": "J", "К": "K", "Л": "L", "Љ": "Lj",
    "М": "M", "Н": "N", "Њ": "Nj", "О": "O", "П": "P", "Р": "R", "С": "S",
    "Т": "T", "Ћ": "C", "У": "U", "Ф": "F", "Х": "H", "Ц": "C", "Ч": "C",
    "Џ": "Dz", "Ш": "S",
}

_DIACRITICS = {
    "č": "c", "ć": "c", "ž": "z", "š": "s", "đ": "dj",
    "Č": "C", "Ć": "C", "Ž": "Z", "Š": "S", "Đ": "Dj",
    "é": "e", "è": "e", "ê": "e", "ë": "e",
    "á": "a", "à": "a", "â": "a", "ä": "a",
    "í": "i", "ì": "i", "î": "i", "ï": "i",
    "ó": "o", "ò": "o", "ô": "o", "ö": "o",
    "ú": "u", "ù": "u", "û": "u", "ü": "u",
    "ý": "y", "ÿ": "y", "ñ": "n",
}


def transliterate(text: str) -> str:
    """Cyrillic to Latin, then drop diacritics: 'Заштита' -> 'Zastita'."""
    if not text:
        return ""
    latin = "".join(_CYRILLIC_TO_LATIN.get(ch, ch) for ch in text)
    return "".join(_DIACRITICS.get(ch, ch) for ch in latin)


def generate_slug(text: str) -> str:
    """SEO-friendly slug: 'Procena rizika – vodič' -> 'procena-rizika-vodic'."""
    if not text:
        return ""
    slug = transliterate(text).lower().strip()
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"[^a-z0-9_\-]+", "", slug)
    slug = re.sub(r"-{2,}", "-", slug)
    slug = slug.strip("-")
    return slug[:SLUG_MAX_LENGTH]


def generate_unique_slug(base_slug: str, existing_slugs: list[str] | set[str]) -> str:
    """Append -1, -2, ... until the slug is not taken."""
    taken = set(existing_slugs)
    if base_slug not in taken:
        return base_slug

    counter = 1
    while f"{base_slug}-{counter}" in taken:
        counter += 1
    return f"{base_slug}-{counter}"
