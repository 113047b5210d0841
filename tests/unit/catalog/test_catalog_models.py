"""Unit tests for catalog entry types."""

import pytest

from emoji_codec.catalog.models import EmojiEntry, Gender, SequenceKind, SkinTone

BOY = "\U0001f466"
MAN = "\U0001f468"
WOMAN = "\U0001f469"
ADULT = "\U0001f9d1"


class TestSkinTone:
    """Test SkinTone enum."""

    def test_types(self):
        assert [tone.type for tone in SkinTone] == ["type_1_2", "type_3", "type_4", "type_5", "type_6"]

    def test_code_points(self):
        assert [ord(tone.unicode) for tone in SkinTone] == [0x1F3FB, 0x1F3FC, 0x1F3FD, 0x1F3FE, 0x1F3FF]

    def test_from_type(self):
        assert SkinTone.from_type("type_6") is SkinTone.TYPE_6
        assert SkinTone.from_type("type_1_2") is SkinTone.TYPE_1_2

    def test_from_type_unknown(self):
        assert SkinTone.from_type("type_7") is None
        assert SkinTone.from_type("TYPE_6") is None
        assert SkinTone.from_type("") is None

    def test_find(self):
        text = BOY + "\U0001f3fd"
        assert SkinTone.find(text, 1) is SkinTone.TYPE_4
        assert SkinTone.find(text, 0) is None

    def test_find_past_end(self):
        assert SkinTone.find(BOY, 1) is None


class TestGender:
    """Test Gender enum."""

    def test_suffix_glyphs(self):
        assert Gender.find("\u2642", 0) is Gender.MALE
        assert Gender.find("\u2640", 0) is Gender.FEMALE
        assert Gender.find("x", 0) is None
        assert Gender.find("", 0) is None

    def test_prefix_glyphs(self):
        assert Gender.from_prefix(MAN) is Gender.MALE
        assert Gender.from_prefix(WOMAN) is Gender.FEMALE
        assert Gender.from_prefix(ADULT) is Gender.PERSON
        assert Gender.from_prefix(BOY) is None
        assert Gender.from_prefix("") is None

    def test_from_type(self):
        assert Gender.from_type("female") is Gender.FEMALE
        assert Gender.from_type("robot") is None


class TestEmojiEntry:
    """Test EmojiEntry dataclass."""

    def test_creation_defaults(self):
        entry = EmojiEntry(unicode=BOY, aliases=("boy",))
        assert entry.primary_alias == "boy"
        assert entry.tags == frozenset()
        assert entry.sequence_kind == SequenceKind.PLAIN
        assert entry.supports_skin_tone is False
        assert entry.alternate is None

    def test_primary_alias_is_first(self):
        entry = EmojiEntry(unicode="\U0001f3c3", aliases=("runner", "running"))
        assert entry.primary_alias == "runner"

    def test_supports_skin_tone(self):
        assert EmojiEntry(BOY, ("boy",), sequence_kind=SequenceKind.BASE_SKIN_GENDER).supports_skin_tone
        assert EmojiEntry(MAN, ("man",), sequence_kind=SequenceKind.GENDER_SKIN_BASE).supports_skin_tone

    def test_html_forms(self):
        entry = EmojiEntry(unicode=BOY, aliases=("boy",))
        assert entry.html_decimal == "&#128102;"
        assert entry.html_hexadecimal == "&#x1f466;"

    def test_html_forms_multiple_code_points(self):
        entry = EmojiEntry(unicode="\U0001f1fa\U0001f1f8", aliases=("us",))
        assert entry.html_decimal == "&#127482;&#127480;"
        assert entry.html_hexadecimal == "&#x1f1fa;&#x1f1f8;"

    def test_requires_unicode(self):
        with pytest.raises(ValueError):
            EmojiEntry(unicode="", aliases=("nothing",))

    def test_requires_alias(self):
        with pytest.raises(ValueError):
            EmojiEntry(unicode=BOY, aliases=())

    def test_immutable(self):
        entry = EmojiEntry(unicode=BOY, aliases=("boy",))
        with pytest.raises(AttributeError):
            entry.unicode = MAN

    def test_hashable(self):
        first = EmojiEntry(unicode=BOY, aliases=("boy",))
        second = EmojiEntry(unicode=BOY, aliases=("boy",))
        assert first == second
        assert len({first, second}) == 1
