#!/usr/bin/env python3
"""Sequence composition on top of trie base matches.

A trie match only covers a catalog glyph. Real text also carries skin-tone
modifiers, gender suffixes and joiner continuations that the catalog does not
list as separate rows. The composer extends a base match according to the
entry's ``SequenceKind``:

BASE_SKIN_GENDER:
    base [skin tone] [joiner + gender glyph]

GENDER_SKIN_BASE:
    gender-prefix base [skin tone] [joiner + nested base]
    The nested base replaces the outer entry as the match identity.

Every kind then absorbs one trailing presentation selector.
"""

from ..catalog.models import PRESENTATION_SELECTOR, ZERO_WIDTH_JOINER, EmojiEntry, Gender, SequenceKind, SkinTone
from .trie import MatchTrie
from .types import MatchResult


class SequenceComposer:
    """Finds composed emoji in text using a frozen MatchTrie."""

    def __init__(self, trie: MatchTrie):
        self.trie = trie

    def match_at(self, text: str, start: int) -> MatchResult | None:
        """Return the composed emoji starting exactly at ``start``, or None."""
        entry = self.trie.get_best_match(text, start)
        if entry is None:
            return None

        skin_tone: SkinTone | None = None
        gender: Gender | None = None
        end = start + len(entry.unicode)

        if entry.sequence_kind == SequenceKind.BASE_SKIN_GENDER:
            skin_tone = SkinTone.find(text, end)
            if skin_tone is not None:
                end += len(skin_tone.unicode)

            # Only a joiner followed by a gender glyph counts; a bare joiner is left alone
            if end < len(text) and text[end] == ZERO_WIDTH_JOINER:
                suffix_gender = Gender.find(text, end + 1)
                if suffix_gender is not None:
                    gender = suffix_gender
                    end += 2

        elif entry.sequence_kind == SequenceKind.GENDER_SKIN_BASE:
            # The gender is baked into the base glyph; the scan position does not move
            gender = Gender.from_prefix(entry.unicode)

            skin_tone = SkinTone.find(text, end)
            if skin_tone is not None:
                end += len(skin_tone.unicode)

            nested = self._nested_base(text, end)
            if nested is not None:
                # The nested base becomes the identity of the whole match
                end += 1 + len(nested.unicode)
                entry = nested

        if end < len(text) and text[end] == PRESENTATION_SELECTOR:
            end += 1

        return MatchResult(entry=entry, skin_tone=skin_tone, gender=gender, source=text, start=start, end=end)

    def _nested_base(self, text: str, pos: int) -> EmojiEntry | None:
        if pos >= len(text) or text[pos] != ZERO_WIDTH_JOINER:
            return None
        return self.trie.get_best_match(text, pos + 1)

    def get_next_emoji(self, text: str, start: int = 0) -> MatchResult | None:
        """Return the first composed emoji at or after ``start``."""
        for pos in range(max(start, 0), len(text)):
            match = self.match_at(text, pos)
            if match is not None:
                return match
        return None

    def iter_emojis(self, text: str, limit: int = 0):
        """Yield non-overlapping matches left to right; ``limit`` <= 0 means all."""
        found = 0
        pos = 0
        while True:
            match = self.get_next_emoji(text, pos)
            if match is None:
                return
            yield match
            found += 1
            if 0 < limit <= found:
                return
            pos = match.end

    def get_emojis(self, text: str, limit: int = 0) -> list[MatchResult]:
        """Collect non-overlapping matches in document order."""
        return list(self.iter_emojis(text, limit))


__all__ = ["SequenceComposer"]
