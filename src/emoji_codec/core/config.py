#!/usr/bin/env python3
"""Configuration loader that reads from config files."""
import os
from pathlib import Path
from typing import Any

import tomllib

from ..exceptions import ConfigurationError

DEFAULT_CONFIG: dict[str, Any] = {
    "catalog": {
        # None selects the data file bundled with the package
        "path": None,
        "legacy_prefixes": ["\U0001f468\u200d", "\U0001f469\u200d", "\U0001f9d1\u200d"],
    },
    "parsing": {"fitzpatrick_action": "parse"},
    "logging": {"level": "INFO"},
}


class ConfigLoader:
    """Load configuration from config files."""

    def __init__(self, config_path: str | Path | None = None) -> None:
        if config_path is None:
            config_path = self._default_config_path()

        self.config_file = str(config_path)
        config_path = Path(config_path)
        if config_path.exists():
            try:
                with open(config_path, "rb") as f:
                    full_config = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigurationError(f"Invalid config file {config_path}: {e}") from e
            emoji_config = full_config.get("emoji", {})
        else:
            emoji_config = {}

        self._config = self._merge_dicts(DEFAULT_CONFIG, emoji_config)

    def _default_config_path(self) -> Path:
        env_path = os.environ.get("EMOJI_CODEC_CONFIG")
        if env_path:
            return Path(env_path)
        return Path.home() / ".emoji-codec" / "config.toml"

    def _merge_dicts(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        merged = base.copy()
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._merge_dicts(merged[key], value)
            else:
                merged[key] = value
        return merged

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get a value using dot notation (e.g., 'catalog.path')"""
        keys = key_path.split(".")
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    @property
    def catalog_path(self) -> Path | None:
        # Environment variable wins over the config file
        env_path = os.environ.get("EMOJI_CODEC_CATALOG")
        if env_path:
            return Path(env_path).expanduser()
        configured = self.get("catalog.path")
        if not configured:
            return None
        return Path(str(configured)).expanduser()

    @property
    def legacy_prefixes(self) -> tuple[str, ...]:
        prefixes = self.get("catalog.legacy_prefixes", [])
        if not isinstance(prefixes, list) or not all(isinstance(p, str) for p in prefixes):
            raise ConfigurationError("catalog.legacy_prefixes must be a list of strings")
        return tuple(prefixes)

    @property
    def fitzpatrick_action(self) -> str:
        """Name of the default skin-tone handling action (parse, remove, ignore...)."""
        env_action = os.environ.get("EMOJI_CODEC_FITZPATRICK_ACTION")
        if env_action:
            return env_action.strip().lower()
        return str(self.get("parsing.fitzpatrick_action", "parse")).strip().lower()

    @property
    def log_level(self) -> str:
        return str(self.get("logging.level", "INFO")).upper()


_config_instance: ConfigLoader | None = None


def get_config() -> ConfigLoader:
    """Return the process-wide configuration, loading it on first use."""
    global _config_instance
    if _config_instance is None:
        _config_instance = ConfigLoader()
    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() re-reads it."""
    global _config_instance
    _config_instance = None
