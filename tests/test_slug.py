"""
Tests for blog/slug.py
"""

from bzr.blog.slug import generate_slug, generate_unique_slug, transliterate


class TestTransliterate:

    def test_cyrillic(self):
        assert transliterate("Заштита на раду") == "Zastita na radu"

    def test_latin_diacritics(self):
        assert transliterate("Čišćenje đubreta") == "Ciscenje djubreta"

    def test_digraphs(self):
        assert transliterate("Љубав њива џеп") == "Ljubav njiva dzep"

    def test_empty(self):
        assert transliterate("") == ""


class TestGenerateSlug:

    def test_basic(self):
        assert generate_slug("Procena rizika – vodič") == "procena-rizika-vodic"

    def test_cyrillic_title(self):
        assert generate_slug("Процена ризика на радном месту") == "procena-rizika-na-radnom-mestu"

    def test_punctuation_removed(self):
        assert generate_slug("Šta je BZR? (Vodič za 2024.)") == "sta-je-bzr-vodic-za-2024"

    def test_no_leading_or_trailing_hyphens(self):
        assert generate_slug(" - Obuka - ") == "obuka"

    def test_truncated(self):
        assert len(generate_slug("reč " * 60)) == 100

    def test_empty(self):
        assert generate_slug("") == ""
        assert generate_slug("?!") == ""


class TestGenerateUniqueSlug:

    def test_free_slug_unchanged(self):
        assert generate_unique_slug("obuka", ["propisi"]) == "obuka"

    def test_first_suffix(self):
        assert generate_unique_slug("obuka", ["obuka"]) == "obuka-1"

    def test_skips_taken_suffixes(self):
        assert generate_unique_slug("obuka", {"obuka", "obuka-1", "obuka-2"}) == "obuka-3"
