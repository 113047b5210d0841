#!/usr/bin/env python3
"""Alias and html entity to unicode conversion.

The reverse direction does not run the trie over raw text. Instead, at each
``:`` or ``&`` it tries two textual productions, in this order:

1. An alias block ``:name:`` or ``:name|type_N:`` validated against the catalog
2. A run of html numeric entities ``&#N;`` / ``&#xH;`` decoded one at a time,
   keeping the longest decoded prefix that is a complete catalog entry

Anything else is copied through unchanged.
"""

import re
from dataclasses import dataclass

from ..catalog.catalog import EmojiCatalog
from ..catalog.models import EmojiEntry, SkinTone

_TRIGGER = re.compile(r"[:&]")
_HTML_ENTITY = re.compile(r"&#(?:x([0-9a-fA-F]+)|([0-9]+));")

MAX_CODE_POINT = 0x10FFFF


@dataclass(frozen=True)
class DecodedCandidate:
    """An alias or entity run recognized at ``[start, end)``."""

    entry: EmojiEntry
    skin_tone: SkinTone | None
    start: int
    end: int

    @property
    def unicode(self) -> str:
        if self.skin_tone is None:
            return self.entry.unicode
        return self.entry.unicode + self.skin_tone.unicode


class AliasOrHtmlDecoder:
    """Converts aliases and html entities back to unicode emoji."""

    def __init__(self, catalog: EmojiCatalog):
        self.catalog = catalog
        self.trie = catalog.trie

    def decode(self, text: str) -> str:
        parts: list[str] = []
        pos = 0
        length = len(text)
        while pos < length:
            trigger = _TRIGGER.search(text, pos)
            if trigger is None:
                parts.append(text[pos:])
                break
            if trigger.start() > pos:
                parts.append(text[pos : trigger.start()])
                pos = trigger.start()

            candidate = self.alias_at(text, pos) or self.html_entity_at(text, pos)
            if candidate is None:
                parts.append(text[pos])
                pos += 1
            else:
                parts.append(candidate.unicode)
                pos = candidate.end
        return "".join(parts)

    def alias_at(self, text: str, start: int) -> DecodedCandidate | None:
        """Recognize ``:alias:`` or ``:alias|type_N:`` starting at ``start``."""
        if start + 2 > len(text) or text[start] != ":":
            return None
        # The alias name is at least one character long
        alias_end = text.find(":", start + 2)
        if alias_end == -1:
            return None

        pipe = text.find("|", start + 2)
        if pipe != -1 and pipe < alias_end:
            entry = self._entry_for_alias(text[start + 1 : pipe])
            if entry is None or not entry.supports_skin_tone:
                return None
            skin_tone = SkinTone.from_type(text[pipe + 1 : alias_end])
            if skin_tone is None:
                return None
            return DecodedCandidate(entry, skin_tone, start, alias_end + 1)

        entry = self._entry_for_alias(text[start + 1 : alias_end])
        if entry is None:
            return None
        return DecodedCandidate(entry, None, start, alias_end + 1)

    def _entry_for_alias(self, name: str) -> EmojiEntry | None:
        if not name or ":" in name:
            return None
        return self.catalog.get_for_alias(name)

    def html_entity_at(self, text: str, start: int) -> DecodedCandidate | None:
        """Recognize the longest run of html entities forming a catalog entry."""
        if not text.startswith("&#", start):
            return None

        decoded: list[str] = []
        best: EmojiEntry | None = None
        best_end = -1
        pos = start
        while len(decoded) < self.trie.max_depth:
            entity = _HTML_ENTITY.match(text, pos)
            if entity is None:
                break
            hex_digits, decimal_digits = entity.groups()
            code_point = int(hex_digits, 16) if hex_digits is not None else int(decimal_digits)
            if code_point > MAX_CODE_POINT:
                break
            decoded.append(chr(code_point))

            scratch = "".join(decoded)
            verdict = self.trie.check(scratch)
            if verdict.exact_match:
                best = self.trie.get_entry(scratch)
                best_end = entity.end()
            if verdict.impossible_match:
                break
            pos = entity.end()

        if best is None:
            return None
        return DecodedCandidate(best, None, start, best_end)


__all__ = ["AliasOrHtmlDecoder", "DecodedCandidate"]
