"""emoji-codec - Find emoji in text and convert between unicode, aliases and html entities.

The bundled catalog is a representative sample of the emoji-java database
(common emoji, flags, skin-tone and gender sequences). Point ``catalog.path`` in
the config file, ``EMOJI_CODEC_CATALOG`` or ``--catalog`` at a full
emoji-java ``emojis.json`` to recognize every emoji.
"""

from importlib import metadata
from importlib import import_module
from pathlib import Path
import tomllib
from typing import TYPE_CHECKING


def _get_version() -> str:
    try:
        return metadata.version("emoji-codec")
    except metadata.PackageNotFoundError:
        pass

    try:
        pyproject_path = Path(__file__).resolve().parents[2] / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
        return str(data["project"]["version"])
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        return "unknown"


__version__ = _get_version()

if TYPE_CHECKING:
    from .catalog import EmojiCatalog, EmojiEntry, Gender, SequenceKind, SkinTone, load_catalog
    from .converters import FitzpatrickAction
    from .exceptions import CatalogLoadError, ConfigurationError, EmojiCodecError
    from .matching import MatchResult
    from .parser import (
        EmojiParser,
        contains_emoji,
        extract_match_strings,
        extract_matches,
        get_default_parser,
        is_emoji,
        is_only_emojis,
        keep_only_set,
        remove_all,
        remove_set,
        replace_all,
        scan_with_custom_formatter,
        to_alias,
        to_html_decimal,
        to_html_hexadecimal,
        to_unicode,
    )

_LAZY_EXPORTS = {
    "EmojiCatalog": (".catalog", "EmojiCatalog"),
    "EmojiEntry": (".catalog", "EmojiEntry"),
    "Gender": (".catalog", "Gender"),
    "SequenceKind": (".catalog", "SequenceKind"),
    "SkinTone": (".catalog", "SkinTone"),
    "load_catalog": (".catalog", "load_catalog"),
    "FitzpatrickAction": (".converters", "FitzpatrickAction"),
    "MatchResult": (".matching", "MatchResult"),
    "CatalogLoadError": (".exceptions", "CatalogLoadError"),
    "ConfigurationError": (".exceptions", "ConfigurationError"),
    "EmojiCodecError": (".exceptions", "EmojiCodecError"),
    "EmojiParser": (".parser", "EmojiParser"),
    "get_default_parser": (".parser", "get_default_parser"),
    "to_alias": (".parser", "to_alias"),
    "to_html_decimal": (".parser", "to_html_decimal"),
    "to_html_hexadecimal": (".parser", "to_html_hexadecimal"),
    "to_unicode": (".parser", "to_unicode"),
    "replace_all": (".parser", "replace_all"),
    "remove_all": (".parser", "remove_all"),
    "remove_set": (".parser", "remove_set"),
    "keep_only_set": (".parser", "keep_only_set"),
    "extract_matches": (".parser", "extract_matches"),
    "extract_match_strings": (".parser", "extract_match_strings"),
    "scan_with_custom_formatter": (".parser", "scan_with_custom_formatter"),
    "is_emoji": (".parser", "is_emoji"),
    "contains_emoji": (".parser", "contains_emoji"),
    "is_only_emojis": (".parser", "is_only_emojis"),
}

__all__ = ["__version__", *_LAZY_EXPORTS]


def __getattr__(name):
    if name not in _LAZY_EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attr_name = _LAZY_EXPORTS[name]
    module = import_module(module_name, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
