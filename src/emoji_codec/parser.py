#!/usr/bin/env python3
"""Emoji parser: the public conversion surface.

This module provides the EmojiParser class, which binds one frozen catalog to
the matching engine and exposes every conversion:

- to_alias / to_html_decimal / to_html_hexadecimal: unicode -> textual forms
- to_unicode: aliases and html entities -> unicode
- replace_all / remove_all / remove_set / keep_only_set: filtering
- extract_matches / extract_match_strings: matching without replacement
- scan_with_custom_formatter: any caller-supplied formatter

Module-level functions of the same names use a shared default parser that is
built on first use from the configured (or bundled) catalog.
"""

import threading
from collections.abc import Iterable

from .catalog.catalog import EmojiCatalog
from .catalog.loader import load_catalog
from .catalog.models import EmojiEntry
from .converters import (
    AliasOrHtmlDecoder,
    FitzpatrickAction,
    alias_formatter,
    fixed_formatter,
    html_decimal_formatter,
    html_hexadecimal_formatter,
    keep_set_formatter,
    remove_set_formatter,
)
from .core.config import ConfigLoader, get_config
from .core.logging import get_logger
from .matching.composer import SequenceComposer
from .matching import scanner
from .matching.scanner import Formatter, scan_and_replace
from .matching.types import MatchResult

logger = get_logger(__name__)


class EmojiParser:
    """Finds and converts emoji using one immutable catalog.

    A parser holds no per-call state, so one instance can serve concurrent
    callers.
    """

    def __init__(self, catalog: EmojiCatalog, default_action: FitzpatrickAction = FitzpatrickAction.PARSE):
        self.catalog = catalog
        self.composer = SequenceComposer(catalog.trie)
        self.decoder = AliasOrHtmlDecoder(catalog)
        self.default_action = default_action

    @classmethod
    def from_config(cls, config: ConfigLoader | None = None) -> "EmojiParser":
        """Build a parser from the configured catalog path and default action."""
        config = config or get_config()
        catalog_path = config.catalog_path
        action = FitzpatrickAction.from_name(config.fitzpatrick_action)
        catalog = load_catalog(catalog_path, legacy_prefixes=config.legacy_prefixes)
        logger.debug(f"Emoji parser ready: {len(catalog)} entries from {catalog_path or 'bundled data'}")
        return cls(catalog, default_action=action)

    def _action(self, action: FitzpatrickAction | str | None) -> FitzpatrickAction:
        if action is None:
            return self.default_action
        return FitzpatrickAction.from_name(action)

    # Forward conversions ------------------------------------------------------

    def to_alias(self, text: str, action: FitzpatrickAction | str | None = None) -> str:
        """Replace emoji with their primary alias, e.g. ``😄`` -> ``:smile:``."""
        action = self._action(action)
        return scan_and_replace(text, self.composer, alias_formatter(action), pad=action.adds_space)

    def to_html_decimal(self, text: str, action: FitzpatrickAction | str | None = None) -> str:
        action = self._action(action)
        return scan_and_replace(text, self.composer, html_decimal_formatter(action), pad=action.adds_space)

    def to_html_hexadecimal(self, text: str, action: FitzpatrickAction | str | None = None) -> str:
        action = self._action(action)
        return scan_and_replace(text, self.composer, html_hexadecimal_formatter(action), pad=action.adds_space)

    def to_unicode(self, text: str) -> str:
        """Replace aliases and html entities with the unicode emoji they name."""
        return self.decoder.decode(text)

    # Filtering ----------------------------------------------------------------

    def replace_all(self, text: str, replacement: str) -> str:
        return scan_and_replace(text, self.composer, fixed_formatter(replacement))

    def remove_all(self, text: str) -> str:
        return scan_and_replace(text, self.composer, fixed_formatter(""))

    def remove_set(self, text: str, entries: Iterable[EmojiEntry]) -> str:
        """Remove only the emoji whose catalog entry is in ``entries``."""
        return scan_and_replace(text, self.composer, remove_set_formatter(entries))

    def keep_only_set(self, text: str, entries: Iterable[EmojiEntry]) -> str:
        """Remove every emoji whose catalog entry is not in ``entries``."""
        return scan_and_replace(text, self.composer, keep_set_formatter(entries))

    # Matching -----------------------------------------------------------------

    def extract_matches(self, text: str, limit: int = 0) -> list[MatchResult]:
        return scanner.extract_matches(text, self.composer, limit)

    def extract_match_strings(self, text: str, limit: int = 0) -> list[str]:
        return scanner.extract_match_strings(text, self.composer, limit)

    def scan_with_custom_formatter(self, text: str, formatter: Formatter, pad: bool = False) -> str:
        return scan_and_replace(text, self.composer, formatter, pad=pad)

    def is_emoji(self, text: str) -> bool:
        """True if ``text`` is exactly one (possibly composed) emoji."""
        match = self.composer.match_at(text, 0) if text else None
        return match is not None and match.end == len(text)

    def contains_emoji(self, text: str) -> bool:
        return self.composer.get_next_emoji(text) is not None

    def is_only_emojis(self, text: str) -> bool:
        """True if ``text`` has at least one emoji and nothing else but whitespace."""
        return self.contains_emoji(text) and not self.remove_all(text).strip()


# ==============================================================================
# PUBLIC API - Module-level functions backed by a shared default parser
# ==============================================================================

_parser_instance: EmojiParser | None = None
_PARSER_LOCK = threading.Lock()


def get_default_parser() -> EmojiParser:
    """Return the shared parser, building it once on first use."""
    global _parser_instance
    if _parser_instance is None:
        with _PARSER_LOCK:
            if _parser_instance is None:
                _parser_instance = EmojiParser.from_config()
    return _parser_instance


def set_default_parser(parser: EmojiParser | None) -> None:
    """Install ``parser`` as the shared parser (None rebuilds it on next use)."""
    global _parser_instance
    with _PARSER_LOCK:
        _parser_instance = parser


def to_alias(text: str, action: FitzpatrickAction | str | None = None) -> str:
    return get_default_parser().to_alias(text, action)


def to_html_decimal(text: str, action: FitzpatrickAction | str | None = None) -> str:
    return get_default_parser().to_html_decimal(text, action)


def to_html_hexadecimal(text: str, action: FitzpatrickAction | str | None = None) -> str:
    return get_default_parser().to_html_hexadecimal(text, action)


def to_unicode(text: str) -> str:
    return get_default_parser().to_unicode(text)


def replace_all(text: str, replacement: str) -> str:
    return get_default_parser().replace_all(text, replacement)


def remove_all(text: str) -> str:
    return get_default_parser().remove_all(text)


def remove_set(text: str, entries: Iterable[EmojiEntry]) -> str:
    return get_default_parser().remove_set(text, entries)


def keep_only_set(text: str, entries: Iterable[EmojiEntry]) -> str:
    return get_default_parser().keep_only_set(text, entries)


def extract_matches(text: str, limit: int = 0) -> list[MatchResult]:
    return get_default_parser().extract_matches(text, limit)


def extract_match_strings(text: str, limit: int = 0) -> list[str]:
    return get_default_parser().extract_match_strings(text, limit)


def scan_with_custom_formatter(text: str, formatter: Formatter, pad: bool = False) -> str:
    return get_default_parser().scan_with_custom_formatter(text, formatter, pad)


def is_emoji(text: str) -> bool:
    return get_default_parser().is_emoji(text)


def contains_emoji(text: str) -> bool:
    return get_default_parser().contains_emoji(text)


def is_only_emojis(text: str) -> bool:
    return get_default_parser().is_only_emojis(text)


__all__ = [
    "EmojiParser",
    "get_default_parser",
    "set_default_parser",
    "to_alias",
    "to_html_decimal",
    "to_html_hexadecimal",
    "to_unicode",
    "replace_all",
    "remove_all",
    "remove_set",
    "keep_only_set",
    "extract_matches",
    "extract_match_strings",
    "scan_with_custom_formatter",
    "is_emoji",
    "contains_emoji",
    "is_only_emojis",
]
