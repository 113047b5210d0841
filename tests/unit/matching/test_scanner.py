"""Unit tests for scan-and-replace and MatchResult."""

import pytest

from emoji_codec.catalog.models import EmojiEntry
from emoji_codec.matching import MatchResult, SequenceComposer
from emoji_codec.matching.scanner import extract_match_strings, extract_matches, scan_and_replace

SMILE = "\U0001f604"
BOY = "\U0001f466"
DARK = "\U0001f3ff"


@pytest.fixture
def composer(catalog):
    return SequenceComposer(catalog.trie)


class TestScanAndReplace:
    """Test the generic re-assembly loop."""

    def test_untouched_text_is_copied(self, composer):
        assert scan_and_replace("no emoji here :)", composer, lambda m: "X") == "no emoji here :)"

    def test_empty_text(self, composer):
        assert scan_and_replace("", composer, lambda m: "X") == ""

    def test_replaces_in_order(self, composer):
        text = "a" + SMILE + "b" + BOY + DARK + "c"
        result = scan_and_replace(text, composer, lambda m: f"<{m.entry.primary_alias}>")
        assert result == "a<smile>b<boy>c"

    def test_formatter_called_once_per_match(self, composer):
        seen = []

        def formatter(match):
            seen.append(match.text)
            return ""

        scan_and_replace(SMILE + "x" + BOY + DARK, composer, formatter)
        assert seen == [SMILE, BOY + DARK]

    def test_pad(self, composer):
        result = scan_and_replace("a" + SMILE + "b", composer, lambda m: "X", pad=True)
        assert result == "a X b"

    def test_adjacent_matches(self, composer):
        assert scan_and_replace(SMILE * 3, composer, lambda m: "-") == "---"


class TestExtract:
    """Test extraction without replacement."""

    def test_extract_matches(self, composer):
        matches = extract_matches("x" + SMILE + BOY + DARK, composer)
        assert [m.entry.primary_alias for m in matches] == ["smile", "boy"]

    def test_extract_strings(self, composer):
        assert extract_match_strings("x" + SMILE + BOY + DARK, composer) == [SMILE, BOY + DARK]

    def test_limit(self, composer):
        assert extract_match_strings(SMILE * 4, composer, limit=3) == [SMILE] * 3


class TestMatchResult:
    """Test MatchResult dataclass."""

    def test_text_and_str(self):
        entry = EmojiEntry(unicode=SMILE, aliases=("smile",))
        match = MatchResult(entry=entry, skin_tone=None, gender=None, source="a" + SMILE, start=1, end=2)
        assert match.text == SMILE
        assert str(match) == SMILE

    def test_skin_tone_defaults(self):
        entry = EmojiEntry(unicode=SMILE, aliases=("smile",))
        match = MatchResult(entry=entry, skin_tone=None, gender=None, source=SMILE, start=0, end=1)
        assert not match.has_skin_tone
        assert match.skin_tone_type == ""
        assert match.skin_tone_unicode == ""

    @pytest.mark.parametrize("start,end", [(-1, 1), (1, 1), (0, 3)])
    def test_invalid_bounds(self, start, end):
        entry = EmojiEntry(unicode=SMILE, aliases=("smile",))
        with pytest.raises(ValueError):
            MatchResult(entry=entry, skin_tone=None, gender=None, source=SMILE + "a", start=start, end=end)
