#!/usr/bin/env python3
"""Immutable emoji catalog with alias, tag and unicode indexes."""

from collections.abc import Iterable, Iterator

from ..core.logging import get_logger
from ..matching.trie import MatchTrie
from .models import PRESENTATION_SELECTOR, EmojiEntry

logger = get_logger(__name__)


class EmojiCatalog:
    """Collection of known emoji entries, built once and never mutated.

    The catalog owns the frozen MatchTrie built from the same entries, so the
    matching engine and the alias lookups always agree on what is known.
    """

    def __init__(self, entries: Iterable[EmojiEntry]):
        self._entries: tuple[EmojiEntry, ...] = tuple(entries)
        self._by_alias: dict[str, EmojiEntry] = {}
        self._by_tag: dict[str, set[EmojiEntry]] = {}
        self._by_alternate: dict[str, EmojiEntry] = {}
        trie = MatchTrie()

        for entry in self._entries:
            trie.insert(entry.unicode, entry)
            for alias in entry.aliases:
                if alias in self._by_alias:
                    logger.debug(f"Alias '{alias}' already registered, keeping the first entry")
                    continue
                self._by_alias[alias] = entry
            for tag in entry.tags:
                self._by_tag.setdefault(tag, set()).add(entry)
            if entry.alternate:
                self._by_alternate.setdefault(entry.alternate, entry)

        self._trie = trie.freeze()
        self._frozen_tags = {tag: frozenset(members) for tag, members in self._by_tag.items()}
        logger.debug(
            f"Built emoji catalog: {len(self._entries)} entries, {len(self._by_alias)} aliases, "
            f"{len(self._frozen_tags)} tags, trie depth {self._trie.max_depth}"
        )

    @property
    def entries(self) -> tuple[EmojiEntry, ...]:
        return self._entries

    @property
    def trie(self) -> MatchTrie:
        return self._trie

    @property
    def all_tags(self) -> frozenset[str]:
        return frozenset(self._frozen_tags)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[EmojiEntry]:
        return iter(self._entries)

    def __contains__(self, entry: object) -> bool:
        return entry in self._entries

    def get_for_alias(self, alias: str) -> EmojiEntry | None:
        """Look up an entry by alias, with or without the surrounding colons."""
        if not alias:
            return None
        return self._by_alias.get(_trim_alias(alias))

    def get_for_tag(self, tag: str) -> frozenset[EmojiEntry]:
        return self._frozen_tags.get(tag, frozenset())

    def get_by_unicode(self, unicode: str) -> EmojiEntry | None:
        """Return the entry whose glyph is exactly ``unicode``.

        A trailing presentation selector is ignored, and alternate glyphs are
        accepted.
        """
        if not unicode:
            return None
        entry = self._trie.get_entry(unicode)
        if entry is None and unicode.endswith(PRESENTATION_SELECTOR):
            entry = self._trie.get_entry(unicode[:-1])
        if entry is None:
            entry = self._by_alternate.get(unicode)
        return entry


def _trim_alias(alias: str) -> str:
    start = 1 if alias.startswith(":") else 0
    end = len(alias) - 1 if alias.endswith(":") and len(alias) > start else len(alias)
    return alias[start:end]


__all__ = ["EmojiCatalog"]
