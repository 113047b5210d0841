"""Type definitions for the emoji catalog.

Provides:
- SequenceKind: Which composition branch applies when an entry is matched as a base
- SkinTone: The five fitzpatrick skin-tone modifiers
- Gender: Gender markers recognized as a joiner suffix or a leading base glyph
- EmojiEntry: One immutable catalog row
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum

ZERO_WIDTH_JOINER = "\u200d"
PRESENTATION_SELECTOR = "\ufe0f"


class SequenceKind(IntEnum):
    """Composition order of a catalog entry (the ``sequence_type`` record field)."""

    PLAIN = 0
    BASE_SKIN_GENDER = 1
    GENDER_SKIN_BASE = 2


class SkinTone(Enum):
    """Fitzpatrick skin-tone modifiers, keyed by their alias type token."""

    TYPE_1_2 = "\U0001f3fb"
    TYPE_3 = "\U0001f3fc"
    TYPE_4 = "\U0001f3fd"
    TYPE_5 = "\U0001f3fe"
    TYPE_6 = "\U0001f3ff"

    @property
    def unicode(self) -> str:
        return self.value

    @property
    def type(self) -> str:
        """Token used in alias output, e.g. ``type_6`` in ``:boy|type_6:``."""
        return self.name.lower()

    @classmethod
    def from_type(cls, token: str) -> "SkinTone | None":
        return _SKIN_TONES_BY_TYPE.get(token)

    @classmethod
    def find(cls, text: str, pos: int) -> "SkinTone | None":
        """Return the modifier at ``text[pos]``, or None."""
        if pos >= len(text):
            return None
        return _SKIN_TONES_BY_UNICODE.get(text[pos])


_SKIN_TONES_BY_TYPE = {tone.type: tone for tone in SkinTone}
_SKIN_TONES_BY_UNICODE = {tone.value: tone for tone in SkinTone}


class Gender(Enum):
    """Gender variants of a composable emoji."""

    MALE = "male"
    FEMALE = "female"
    PERSON = "person"

    @classmethod
    def from_type(cls, name: str) -> "Gender | None":
        try:
            return cls[name.upper()]
        except KeyError:
            return None

    @classmethod
    def find(cls, text: str, pos: int) -> "Gender | None":
        """Return the gender whose suffix glyph sits at ``text[pos]``, or None."""
        if pos >= len(text):
            return None
        return _GENDER_SUFFIXES.get(text[pos])

    @classmethod
    def from_prefix(cls, unicode: str) -> "Gender | None":
        """Return the gender implied by the leading glyph of a gender-first base."""
        if not unicode:
            return None
        return _GENDER_PREFIXES.get(unicode[0])


_GENDER_SUFFIXES = {
    "\u2642": Gender.MALE,
    "\u2640": Gender.FEMALE,
}

_GENDER_PREFIXES = {
    "\U0001f468": Gender.MALE,
    "\U0001f469": Gender.FEMALE,
    "\U0001f9d1": Gender.PERSON,
}


@dataclass(frozen=True)
class EmojiEntry:
    """A single catalog row.

    ``aliases`` is ordered; the first one is the primary alias used for every
    single-alias output. Entries are never linked to each other: composition
    across rows happens at match time.
    """

    unicode: str
    aliases: tuple[str, ...]
    tags: frozenset[str] = field(default_factory=frozenset)
    sequence_kind: SequenceKind = SequenceKind.PLAIN
    description: str | None = None
    alternate: str | None = None

    def __post_init__(self) -> None:
        if not self.unicode:
            raise ValueError("EmojiEntry.unicode must not be empty")
        if not self.aliases:
            raise ValueError(f"EmojiEntry {self.unicode!r} needs at least one alias")

    @property
    def primary_alias(self) -> str:
        return self.aliases[0]

    @property
    def supports_skin_tone(self) -> bool:
        return self.sequence_kind != SequenceKind.PLAIN

    @property
    def html_decimal(self) -> str:
        return "".join(f"&#{ord(ch)};" for ch in self.unicode)

    @property
    def html_hexadecimal(self) -> str:
        return "".join(f"&#x{ord(ch):x};" for ch in self.unicode)

    def __repr__(self) -> str:
        return f"EmojiEntry({self.primary_alias!r}, {self.unicode!r})"
