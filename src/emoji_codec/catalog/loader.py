#!/usr/bin/env python3
"""Load the emoji catalog from a JSON database.

The database is a JSON array of records (see ``CatalogRecord``). Loading is
all-or-nothing: an unreadable file, malformed JSON or a single invalid record
raises ``CatalogLoadError`` and no catalog is built.
"""

import json
from collections.abc import Iterable
from importlib import resources
from pathlib import Path
from typing import IO, Any

from pydantic import ValidationError

from ..core.logging import get_logger
from ..exceptions import CatalogLoadError
from .catalog import EmojiCatalog
from .models import ZERO_WIDTH_JOINER, EmojiEntry
from .schema import CatalogRecord

logger = get_logger(__name__)

# Gender glyph + joiner rows from older data versions. These sequences are
# composed at match time from the bare gender glyph instead.
LEGACY_PREFIXES: tuple[str, ...] = (
    "\U0001f468" + ZERO_WIDTH_JOINER,
    "\U0001f469" + ZERO_WIDTH_JOINER,
    "\U0001f9d1" + ZERO_WIDTH_JOINER,
)

# Sample of the emoji-java database; full databases load through a path
BUNDLED_DATA = "emojis.json"

CatalogSource = str | Path | IO[str] | IO[bytes] | None


def _read_source(source: CatalogSource) -> Any:
    try:
        if source is None:
            data_file = resources.files("emoji_codec.catalog").joinpath("data").joinpath(BUNDLED_DATA)
            text = data_file.read_text(encoding="utf-8")
        elif isinstance(source, (str, Path)):
            text = Path(source).read_text(encoding="utf-8")
        else:
            raw = source.read()
            text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogLoadError(f"Cannot read emoji catalog: {e}") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Emoji catalog is not valid JSON: {e}") from e


def parse_records(records: Any, legacy_prefixes: Iterable[str] = LEGACY_PREFIXES) -> list[EmojiEntry]:
    """Validate raw records and turn them into catalog entries."""
    if not isinstance(records, list):
        raise CatalogLoadError(f"Emoji catalog must be a JSON array, got {type(records).__name__}")

    prefixes = tuple(legacy_prefixes)
    entries: list[EmojiEntry] = []
    skipped = 0
    for index, raw in enumerate(records):
        try:
            record = CatalogRecord.model_validate(raw)
        except ValidationError as e:
            raise CatalogLoadError(f"Invalid emoji catalog record #{index}: {e}") from e

        if prefixes and record.emoji.startswith(prefixes):
            skipped += 1
            logger.debug(f"Skipping legacy record #{index} {record.aliases[0]!r}")
            continue
        entries.append(record.to_entry())

    logger.debug(f"Parsed {len(entries)} emoji records ({skipped} legacy records skipped)")
    return entries


def load_entries(source: CatalogSource = None, legacy_prefixes: Iterable[str] = LEGACY_PREFIXES) -> list[EmojiEntry]:
    """Load catalog entries from a path, an open stream, or the bundled database."""
    return parse_records(_read_source(source), legacy_prefixes)


def load_catalog(source: CatalogSource = None, legacy_prefixes: Iterable[str] = LEGACY_PREFIXES) -> EmojiCatalog:
    """Load and freeze an ``EmojiCatalog``."""
    return EmojiCatalog(load_entries(source, legacy_prefixes))


__all__ = ["LEGACY_PREFIXES", "load_catalog", "load_entries", "parse_records"]
