#!/usr/bin/env python3
"""Custom exceptions for emoji catalog and conversion operations.

This module defines the exception hierarchy for emoji-codec errors. Conversion
functions never raise on malformed text; these are reserved for catalog loading
and configuration problems.
"""


class EmojiCodecError(Exception):
    """Base exception for emoji-codec errors."""


class CatalogLoadError(EmojiCodecError):
    """Exception for catalog data that cannot be read, parsed or validated."""


class ConfigurationError(EmojiCodecError):
    """Exception for invalid configuration values."""
