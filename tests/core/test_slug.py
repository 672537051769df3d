import pytest

from ditawiki.core.slug import RUNE_NAMES, slugify, validate_slug


class TestSlugify:
    """Conversion of arbitrary text into slugs."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Hello World", "hello-world"),
            ("Hello  World  /  Test", "hello-world/test"),
            ("&Hello_世界/+!", "amp-hello-世界/plus-excl"),
            ("Setup and Install", "setup-and-install"),
            ("owner=Page", "owner=page"),
            ("  leading and trailing  ", "leading-and-trailing"),
            ("1.2.3 Release", "1-2-3-release"),
            ("C++", "c-plus-plus"),
            ("", "-"),
            ("---", "-"),
        ],
    )
    def test_examples(self, text, expected):
        assert slugify(text) == expected

    @pytest.mark.parametrize("text", ["Hello World", "&Hello_世界/+!", "a - b , c", "Ünïcödé Title", "x=y/z"])
    def test_idempotent(self, text):
        slug = slugify(text)
        assert slugify(slug) == slug

    def test_unknown_symbols_break_words(self):
        # no entity name for the asterism, it only separates words
        assert slugify("left⁂right") == "left-right"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("A ⁄ B", "a-frasl-b"),
            ("x˜y", "x-tilde-y"),
            ("Press ↵", "press-crarr"),
            ("f: a ↦ b", "f-colon-a-map-b"),
            ("x ≠ y", "x-ne-y"),
        ],
    )
    def test_symbols_beyond_latin1(self, text, expected):
        assert slugify(text) == expected

    def test_named_symbols_keep_titles_apart(self):
        assert slugify("A ⁄ B") != slugify("A B")

    def test_entity_table_is_complete(self):
        assert len(RUNE_NAMES) == 890
        assert RUNE_NAMES["⁄"] == "frasl"
        assert all(len(symbol) == 1 for symbol in RUNE_NAMES)


class TestValidateSlug:
    def test_accepts_slugs(self):
        validate_slug("hello-world")

    def test_rejects_empty(self):
        with pytest.raises(ValueError, match="empty"):
            validate_slug("")

    def test_rejects_unslugified(self):
        with pytest.raises(ValueError, match="modified"):
            validate_slug("Hello World")
