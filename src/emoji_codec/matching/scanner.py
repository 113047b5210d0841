#!/usr/bin/env python3
"""Generic scan-and-replace over composed emoji matches.

Every conversion in the package is this one loop with a different formatter:
untouched text between matches is copied through in order, and each match is
replaced by whatever the formatter returns for it.
"""

from collections.abc import Callable

from .composer import SequenceComposer
from .types import MatchResult

Formatter = Callable[[MatchResult], str]

PAD = " "


def scan_and_replace(text: str, composer: SequenceComposer, formatter: Formatter, pad: bool = False) -> str:
    """Replace each emoji in ``text`` with ``formatter(match)``.

    Args:
        text: Input text
        composer: Composer bound to the catalog trie
        formatter: Called once per match, in document order
        pad: Frame each formatter output with a leading and trailing space

    Returns:
        The re-assembled text

    """
    parts: list[str] = []
    prev = 0
    for match in composer.iter_emojis(text):
        parts.append(text[prev : match.start])
        replacement = formatter(match)
        if pad:
            replacement = f"{PAD}{replacement}{PAD}"
        parts.append(replacement)
        prev = match.end
    parts.append(text[prev:])
    return "".join(parts)


def extract_matches(text: str, composer: SequenceComposer, limit: int = 0) -> list[MatchResult]:
    """Return the first ``limit`` matches (all of them when ``limit`` <= 0)."""
    return composer.get_emojis(text, limit)


def extract_match_strings(text: str, composer: SequenceComposer, limit: int = 0) -> list[str]:
    """Return the matched source slices instead of the match objects."""
    return [match.text for match in composer.get_emojis(text, limit)]


__all__ = ["Formatter", "extract_match_strings", "extract_matches", "scan_and_replace"]
