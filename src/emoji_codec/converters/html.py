#!/usr/bin/env python3
"""Unicode to html numeric entity conversion.

Only the base glyph is encoded. The skin-tone modifier is dropped unless the
action is IGNORE, in which case the raw modifier follows the entities.
"""

from ..matching.scanner import Formatter
from ..matching.types import MatchResult
from .actions import FitzpatrickAction


def html_decimal_formatter(action: FitzpatrickAction = FitzpatrickAction.PARSE) -> Formatter:
    """Build a formatter emitting ``&#128102;`` style entities."""

    def _format(match: MatchResult) -> str:
        if action is FitzpatrickAction.IGNORE:
            return match.entry.html_decimal + match.skin_tone_unicode
        return match.entry.html_decimal

    return _format


def html_hexadecimal_formatter(action: FitzpatrickAction = FitzpatrickAction.PARSE) -> Formatter:
    """Build a formatter emitting ``&#x1f466;`` style entities."""

    def _format(match: MatchResult) -> str:
        if action is FitzpatrickAction.IGNORE:
            return match.entry.html_hexadecimal + match.skin_tone_unicode
        return match.entry.html_hexadecimal

    return _format


__all__ = ["html_decimal_formatter", "html_hexadecimal_formatter"]
