"""
Pytest configuration shared by all emoji-codec tests.

Builds a small deterministic catalog so tests do not depend on the bundled
database, and isolates every test from the user's config file and environment.
"""

import pytest

from emoji_codec.catalog import EmojiCatalog, parse_records
from emoji_codec.core.config import reset_config
from emoji_codec.core.logging import shutdown_logging
from emoji_codec.parser import EmojiParser, set_default_parser

SAMPLE_RECORDS = [
    {"emoji": "\U0001f604", "description": "smile", "aliases": ["smile", "happy"], "tags": ["happy", "joy"]},
    {"emoji": "\U0001f600", "description": "grinning", "aliases": ["grinning"], "tags": ["happy"]},
    {"emoji": "\u2764", "emojiChar": "\u2764\ufe0f", "aliases": ["heart"], "tags": ["love"]},
    {"emoji": "\U0001f1fa\U0001f1f8", "aliases": ["us"], "tags": ["flag"]},
    {"emoji": "\U0001f441", "aliases": ["eye"], "tags": []},
    {"emoji": "\U0001f441\u200d\U0001f5e8", "aliases": ["eye_speech_bubble"], "tags": []},
    {"emoji": "\U0001f3a8", "aliases": ["art"], "tags": ["painting"]},
    {"emoji": "\U0001f466", "aliases": ["boy"], "tags": ["child"], "sequence_type": 1},
    {"emoji": "\U0001f3c3", "aliases": ["runner", "running"], "tags": ["exercise"], "sequence_type": 1},
    {"emoji": "\U0001f476", "aliases": ["baby"], "tags": ["child"], "supports_fitzpatrick": True},
    {"emoji": "\U0001f468", "aliases": ["man"], "tags": [], "sequence_type": 2},
    {"emoji": "\U0001f469", "aliases": ["woman"], "tags": [], "sequence_type": 2},
    # Legacy row, dropped at load time
    {"emoji": "\U0001f468\u200d\U0001f3a8", "aliases": ["man_artist"], "tags": ["painter"]},
]


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Point config and log lookups at the tmp dir and clear shared singletons."""
    monkeypatch.setenv("EMOJI_CODEC_CONFIG", str(tmp_path / "missing-config.toml"))
    monkeypatch.delenv("EMOJI_CODEC_CATALOG", raising=False)
    monkeypatch.delenv("EMOJI_CODEC_FITZPATRICK_ACTION", raising=False)
    monkeypatch.delenv("EMOJI_CODEC_CONSOLE_LOGS", raising=False)
    monkeypatch.delenv("EMOJI_CODEC_FILE_LOGS", raising=False)
    monkeypatch.setenv("EMOJI_CODEC_LOG_DIR", str(tmp_path / "logs"))
    reset_config()
    set_default_parser(None)
    yield
    reset_config()
    set_default_parser(None)
    shutdown_logging()


@pytest.fixture
def sample_records():
    return [dict(record) for record in SAMPLE_RECORDS]


@pytest.fixture
def catalog(sample_records):
    """Small catalog with plain, modifier-first and gender-first entries."""
    return EmojiCatalog(parse_records(sample_records))


@pytest.fixture
def parser(catalog):
    return EmojiParser(catalog)
