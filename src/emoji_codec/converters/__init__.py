#!/usr/bin/env python3
"""
Converters module for emoji representations.

Forward converters are formatter factories plugged into the scan pipeline
(alias, html decimal, html hexadecimal, strip/replace/filter). The reverse
direction is handled by AliasOrHtmlDecoder.
"""

from .actions import FitzpatrickAction
from .alias import alias_formatter, format_alias
from .html import html_decimal_formatter, html_hexadecimal_formatter
from .filters import fixed_formatter, keep_set_formatter, remove_set_formatter
from .decoder import AliasOrHtmlDecoder, DecodedCandidate

__all__ = [
    "FitzpatrickAction",
    "alias_formatter",
    "format_alias",
    "html_decimal_formatter",
    "html_hexadecimal_formatter",
    "fixed_formatter",
    "keep_set_formatter",
    "remove_set_formatter",
    "AliasOrHtmlDecoder",
    "DecodedCandidate",
]
