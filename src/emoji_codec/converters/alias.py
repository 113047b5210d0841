#!/usr/bin/env python3
"""Unicode to alias conversion.

Examples:
- "😄" -> ":smile:"
- "👦🏿" -> ":boy|type_6:" (PARSE), ":boy:" (REMOVE), ":boy:🏿" (IGNORE)
"""

from ..matching.scanner import Formatter
from ..matching.types import MatchResult
from .actions import FitzpatrickAction


def format_alias(match: MatchResult, action: FitzpatrickAction = FitzpatrickAction.PARSE) -> str:
    alias = match.entry.primary_alias
    if action in (FitzpatrickAction.PARSE, FitzpatrickAction.PARSE_AND_ADD_SPACE) and match.has_skin_tone:
        return f":{alias}|{match.skin_tone_type}:"
    if action is FitzpatrickAction.IGNORE:
        return f":{alias}:{match.skin_tone_unicode}"
    return f":{alias}:"


def alias_formatter(action: FitzpatrickAction = FitzpatrickAction.PARSE) -> Formatter:
    """Build a scan formatter that renders each match as its primary alias."""

    def _format(match: MatchResult) -> str:
        return format_alias(match, action)

    return _format


__all__ = ["alias_formatter", "format_alias"]
