"""Type definitions for emoji matching.

Provides:
- MatchResult: One composed emoji found in a text buffer
"""

from dataclasses import dataclass, field
from functools import cached_property

from ..catalog.models import EmojiEntry, Gender, SkinTone


@dataclass(frozen=True)
class MatchResult:
    """A composed emoji found in ``source`` at ``[start, end)``.

    ``end`` covers everything the composer consumed: base glyph, skin-tone
    modifier, gender suffix, joined nested base and trailing presentation
    selector. ``entry`` is the resolved identity, which for gender-first
    sequences is the nested base found after the joiner.
    """

    entry: EmojiEntry
    skin_tone: SkinTone | None
    gender: Gender | None
    source: str = field(repr=False)
    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start < self.end <= len(self.source):
            raise ValueError(f"Invalid match bounds [{self.start}:{self.end}] for text of length {len(self.source)}")

    @cached_property
    def text(self) -> str:
        """The matched slice of the source buffer."""
        return self.source[self.start : self.end]

    @property
    def has_skin_tone(self) -> bool:
        return self.skin_tone is not None

    @property
    def skin_tone_type(self) -> str:
        return self.skin_tone.type if self.skin_tone is not None else ""

    @property
    def skin_tone_unicode(self) -> str:
        return self.skin_tone.unicode if self.skin_tone is not None else ""

    @property
    def base_end(self) -> int:
        """End of the resolved entry's glyph, excluding any skin-tone modifier.

        Computed from the entry length, so it only lines up with the source
        for entries that were not substituted by a nested base.
        """
        return self.start + len(self.entry.unicode)

    @property
    def skin_tone_end(self) -> int:
        return self.base_end + (len(self.skin_tone.unicode) if self.skin_tone is not None else 0)

    def __str__(self) -> str:
        return self.text


__all__ = ["MatchResult"]
