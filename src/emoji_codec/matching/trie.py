"""Prefix trie over emoji sequences for greedy longest-match lookup.

The trie is keyed by ``str`` characters (code points). Composite emoji are
walked transition by transition, so a lookup never has to know in advance
where a sequence ends:

  - ``get_best_match`` returns the entry of the deepest complete node reached
  - ``check`` tells the html entity decoder whether a partially decoded
    buffer can still grow into a catalog entry
  - ``max_depth`` bounds how many characters any lookup can consume
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..catalog.models import EmojiEntry


class TrieVerdict(Enum):
    """Result of checking a character run against the trie."""

    EXACT = "exact"
    POSSIBLE = "possible"
    IMPOSSIBLE = "impossible"

    @property
    def exact_match(self) -> bool:
        return self is TrieVerdict.EXACT

    @property
    def impossible_match(self) -> bool:
        return self is TrieVerdict.IMPOSSIBLE


class TrieNode:
    """Single node in the trie tree."""

    __slots__ = ("children", "entry")

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.entry: EmojiEntry | None = None  # set when this node completes a sequence


class MatchTrie:
    """Trie mapping emoji sequences to catalog entries.

    Built once by the catalog, then frozen; lookups never mutate it, so a
    frozen trie can be shared by any number of concurrent readers.
    """

    __slots__ = ("_root", "_max_depth", "_frozen", "_size")

    def __init__(self) -> None:
        self._root = TrieNode()
        self._max_depth = 0
        self._frozen = False
        self._size = 0

    def insert(self, sequence: str, entry: EmojiEntry) -> None:
        """Register ``entry`` under ``sequence``. The first registration wins."""
        if self._frozen:
            raise RuntimeError("MatchTrie is frozen")
        if not sequence:
            raise ValueError("Cannot register an empty sequence")

        node = self._root
        for char in sequence:
            child = node.children.get(char)
            if child is None:
                child = TrieNode()
                node.children[char] = child
            node = child

        if node.entry is None:
            node.entry = entry
            self._size += 1
        self._max_depth = max(self._max_depth, len(sequence))

    def freeze(self) -> MatchTrie:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def max_depth(self) -> int:
        """Length of the longest registered sequence."""
        return self._max_depth

    def __len__(self) -> int:
        return self._size

    def get_best_match(self, text: str, start: int) -> EmojiEntry | None:
        """Return the entry of the longest registered sequence starting at ``start``."""
        node = self._root
        best = None
        for pos in range(start, len(text)):
            node = node.children.get(text[pos])
            if node is None:
                break
            if node.entry is not None:
                best = node.entry
        return best

    def check(self, text: str, start: int = 0, end: int | None = None) -> TrieVerdict:
        """Classify ``text[start:end]`` as a complete sequence, a prefix of one, or neither."""
        if end is None:
            end = len(text)
        node = self._walk(text, start, end)
        if node is None:
            return TrieVerdict.IMPOSSIBLE
        if node.entry is not None:
            return TrieVerdict.EXACT
        return TrieVerdict.POSSIBLE

    def get_entry(self, text: str, start: int = 0, end: int | None = None) -> EmojiEntry | None:
        """Return the entry registered for exactly ``text[start:end]``."""
        if end is None:
            end = len(text)
        node = self._walk(text, start, end)
        return node.entry if node is not None else None

    def _walk(self, text: str, start: int, end: int) -> TrieNode | None:
        if start >= end:
            return None
        node = self._root
        for pos in range(start, end):
            node = node.children.get(text[pos])
            if node is None:
                return None
        return node


__all__ = ["MatchTrie", "TrieNode", "TrieVerdict"]
