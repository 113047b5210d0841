"""Unit tests for EmojiCatalog lookups."""

import pytest

from emoji_codec.catalog import EmojiCatalog, EmojiEntry

SMILE = "\U0001f604"
HEART = "\u2764"


class TestAliasLookup:
    """Test get_for_alias."""

    def test_plain_alias(self, catalog):
        assert catalog.get_for_alias("smile").unicode == SMILE

    def test_secondary_alias(self, catalog):
        assert catalog.get_for_alias("happy") is catalog.get_for_alias("smile")

    def test_colons_are_trimmed(self, catalog):
        assert catalog.get_for_alias(":smile:").unicode == SMILE
        assert catalog.get_for_alias(":smile").unicode == SMILE

    def test_unknown_alias(self, catalog):
        assert catalog.get_for_alias("nope") is None
        assert catalog.get_for_alias("") is None
        assert catalog.get_for_alias(":") is None

    def test_first_duplicate_alias_wins(self):
        first = EmojiEntry(unicode=SMILE, aliases=("shared",))
        second = EmojiEntry(unicode="\U0001f600", aliases=("shared", "grinning"))
        catalog = EmojiCatalog([first, second])

        assert catalog.get_for_alias("shared") is first
        assert catalog.get_for_alias("grinning") is second


class TestTagLookup:
    """Test get_for_tag and all_tags."""

    def test_tag_members(self, catalog):
        happy = catalog.get_for_tag("happy")
        assert {entry.primary_alias for entry in happy} == {"smile", "grinning"}

    def test_unknown_tag(self, catalog):
        assert catalog.get_for_tag("nope") == frozenset()

    def test_tag_sets_are_immutable(self, catalog):
        assert isinstance(catalog.get_for_tag("happy"), frozenset)

    def test_all_tags(self, catalog):
        assert {"happy", "joy", "love", "child"} <= catalog.all_tags


class TestUnicodeLookup:
    """Test get_by_unicode."""

    def test_exact(self, catalog):
        assert catalog.get_by_unicode(SMILE).primary_alias == "smile"

    def test_trailing_presentation_selector(self, catalog):
        assert catalog.get_by_unicode(SMILE + "\ufe0f").primary_alias == "smile"

    def test_alternate_glyph(self, catalog):
        assert catalog.get_by_unicode(HEART + "\ufe0f").primary_alias == "heart"

    def test_prefix_is_not_a_match(self, catalog):
        assert catalog.get_by_unicode("\U0001f1fa") is None

    def test_unknown(self, catalog):
        assert catalog.get_by_unicode("a") is None
        assert catalog.get_by_unicode("") is None


class TestCatalogCollection:
    """Test the collection protocol and the owned trie."""

    def test_len_and_iter(self, catalog):
        assert len(catalog) == len(list(catalog))
        assert list(catalog) == list(catalog.entries)

    def test_contains(self, catalog):
        entry = catalog.get_for_alias("smile")
        assert entry in catalog
        assert EmojiEntry(unicode="\U0001f916", aliases=("robot",)) not in catalog

    def test_trie_is_frozen(self, catalog):
        assert catalog.trie.frozen
        with pytest.raises(RuntimeError):
            catalog.trie.insert("\U0001f916", EmojiEntry(unicode="\U0001f916", aliases=("robot",)))

    def test_trie_depth(self, catalog):
        # eye_speech_bubble is three code points long
        assert catalog.trie.max_depth == 3

    def test_empty_catalog(self):
        catalog = EmojiCatalog([])
        assert len(catalog) == 0
        assert catalog.get_for_alias("smile") is None
        assert catalog.trie.max_depth == 0
