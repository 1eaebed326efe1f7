"""
Tests for casing transfer.

Run with: pytest tests/test_casing.py -v
"""

from lunari.casing import apply_casing, is_all_caps, is_title_case


class TestPredicates:
    """Case-shape predicates."""

    def test_all_caps_needs_two_characters(self):
        """A single uppercase letter is not all caps."""
        assert is_all_caps("HI")
        assert not is_all_caps("I")

    def test_all_caps_with_apostrophe(self):
        assert is_all_caps("DON'T")

    def test_title_case(self):
        assert is_title_case("Hello")
        assert is_title_case("I")
        assert not is_title_case("hello")
        assert not is_title_case("HeLLo")

    def test_title_case_empty(self):
        assert not is_title_case("")


class TestApplyCasing:
    """Recasing a translation from the source token."""

    def test_uppercase(self):
        """All-caps source uppercases the whole translation."""
        assert apply_casing("HELLO", "ya") == "YA"

    def test_title_case(self):
        """Title-case source capitalizes only the first character."""
        assert apply_casing("World", "mona") == "Mona"

    def test_title_case_lowers_rest(self):
        """The rest of the translation is lowered for title case."""
        assert apply_casing("World", "mONA") == "Mona"

    def test_lowercase(self):
        """Lowercase source lowercases the translation."""
        assert apply_casing("star", "Esti") == "esti"

    def test_single_capital_letter_is_title(self):
        """'I' is title case, not all caps."""
        assert apply_casing("I", "mi") == "Mi"

    def test_irregular_keeps_dictionary_form(self):
        """Mixed casing leaves the stored translation alone."""
        assert apply_casing("iPhone", "FoNu") == "FoNu"

    def test_empty_translation(self):
        """An empty translation is returned unchanged."""
        assert apply_casing("Hello", "") == ""

    def test_multi_word_translation_title(self):
        """Title case only capitalizes the first character of the translation."""
        assert apply_casing("Hello", "YA NA") == "Ya na"

    def test_possessive_token_title(self):
        """The possessive suffix does not break title-case detection."""
        assert apply_casing("Alex's", "aleks") == "Aleks"
