"""Formatters that strip, replace or selectively keep emoji."""

from collections.abc import Iterable

from ..catalog.models import EmojiEntry
from ..matching.scanner import Formatter
from ..matching.types import MatchResult


def fixed_formatter(replacement: str = "") -> Formatter:
    """Replace every match with ``replacement`` (empty string strips emoji)."""

    def _format(match: MatchResult) -> str:
        return replacement

    return _format


def remove_set_formatter(entries: Iterable[EmojiEntry]) -> Formatter:
    """Strip matches whose entry is in ``entries``; keep the others verbatim."""
    targets = frozenset(entries)

    def _format(match: MatchResult) -> str:
        return "" if match.entry in targets else match.text

    return _format


def keep_set_formatter(entries: Iterable[EmojiEntry]) -> Formatter:
    """Keep matches whose entry is in ``entries`` verbatim; strip the others."""
    keep = frozenset(entries)

    def _format(match: MatchResult) -> str:
        return match.text if match.entry in keep else ""

    return _format


__all__ = ["fixed_formatter", "keep_set_formatter", "remove_set_formatter"]
