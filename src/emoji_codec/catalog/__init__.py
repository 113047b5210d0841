"""Emoji catalog: entry types, JSON ingestion and the immutable catalog.

Public API:
- EmojiCatalog: Frozen collection of entries with alias/tag/unicode lookups
- load_catalog(): Build a catalog from a JSON database (bundled sample by default)
- EmojiEntry, SequenceKind, SkinTone, Gender: Catalog and match types

The bundled ``data/emojis.json`` is a small sample of the emoji-java database.
A full emoji-java ``emojis.json`` loads unchanged through ``load_catalog(path)``.
"""

from .models import (
    PRESENTATION_SELECTOR,
    ZERO_WIDTH_JOINER,
    EmojiEntry,
    Gender,
    SequenceKind,
    SkinTone,
)
from .catalog import EmojiCatalog
from .schema import CatalogRecord
from .loader import LEGACY_PREFIXES, load_catalog, load_entries, parse_records

__all__ = [
    # Main API
    "EmojiCatalog",
    "load_catalog",
    "load_entries",
    "parse_records",
    "LEGACY_PREFIXES",
    # Types
    "EmojiEntry",
    "Gender",
    "SequenceKind",
    "SkinTone",
    "CatalogRecord",
    # Constants
    "PRESENTATION_SELECTOR",
    "ZERO_WIDTH_JOINER",
]
