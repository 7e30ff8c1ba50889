#!/usr/bin/env python3
"""
Configuration loader for the Discord Command Logger plugin.
Handles loading from the plugin's config file and environment variables.
"""

import os
import json
import logging
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Dict, Union

from .models import Config, ConfigurationError, MESSAGE_STYLES, field_to_key

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"

WEBHOOK_URL_EXAMPLE = "https://discord.com/api/webhooks/<id>/<token>"

# Environment variable -> config file key
ENV_OVERRIDES = {
    "DISCORD_WEBHOOK_URL": "webhook-url",
    "LOG_LEVEL": "log-level",
}

_TRUE_STRINGS = {"true", "yes", "on", "1"}
_FALSE_STRINGS = {"false", "no", "off", "0"}


def config_path(data_dir: Union[str, Path]) -> Path:
    return Path(data_dir) / CONFIG_FILE_NAME


def load_config(data_dir: Union[str, Path]) -> Config:
    """
    Load configuration from the plugin data directory and environment variables.

    A missing config file is created with every recognized key set to its
    default. A corrupt one (empty, unreadable, not a JSON object) is replaced
    with defaults and reloaded.

    Args:
        data_dir: The plugin's private data directory

    Returns:
        Config: Configuration object with all settings loaded
    """
    path = config_path(data_dir)

    if not path.exists():
        logger.info(f"Config file {path} not found, writing defaults")
        _write_defaults(path)

    raw = _read_config_file(path)
    if raw is None:
        logger.warning(f"Config file {path} is empty or corrupt, regenerating defaults")
        if _write_defaults(path):
            raw = _read_config_file(path)
        raw = raw or {}

    for env_name, key in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            raw[key] = value

    return _build_config(raw)


def save_default_config(path: Path) -> None:
    """Write a config file containing every recognized key with its default."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(Config().to_file_dict(), f, indent=2)
        f.write("\n")


def _write_defaults(path: Path) -> bool:
    try:
        save_default_config(path)
    except OSError as e:
        logger.warning(f"Could not write default config file {path}: {e}; using built-in defaults")
        return False
    return True


def validate_config(config: Config, path: Union[str, Path, None] = None) -> None:
    """
    Validate that required configuration values are present.

    Args:
        config (Config): Configuration object to validate
        path: Config file location, named in the error message

    Raises:
        ConfigurationError: If the webhook URL is missing
    """
    if not config.webhook_url.strip():
        where = f" in {path}" if path else ""
        raise ConfigurationError(
            f"Webhook URL not configured! Set 'webhook-url'{where} to your Discord "
            f"webhook, e.g. \"webhook-url\": \"{WEBHOOK_URL_EXAMPLE}\""
        )


def _read_config_file(path: Path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        logger.warning(f"Could not read config file {path}: {e}")
        return None

    if not text.strip():
        return None

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning(f"Could not parse config file {path}: {e}")
        return None

    if not isinstance(data, dict) or not data:
        return None
    return data


def _build_config(raw: Dict[str, Any]) -> Config:
    defaults = Config()
    values = {}
    for f in fields(Config):
        key = field_to_key(f.name)
        if key not in raw:
            continue
        default = getattr(defaults, f.name)
        values[f.name] = _coerce(key, raw[key], default)

    config = replace(defaults, **values)

    if config.message_style not in MESSAGE_STYLES:
        logger.warning(f"Unknown message-style {config.message_style!r}, using 'embed'")
        config = replace(config, message_style="embed")

    return config


def _coerce(key: str, value: Any, default: Any) -> Any:
    """Convert a raw file value to the type of its default, or fall back to the default."""
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
        if isinstance(value, (str, int)):
            text = str(value).strip().lower()
            if text in _TRUE_STRINGS:
                return True
            if text in _FALSE_STRINGS:
                return False
    elif isinstance(default, int):
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 0xFFFFFF:
            return value
    elif isinstance(default, str):
        if value is None:
            return default
        if isinstance(value, (str, int, float)):
            return str(value)

    logger.warning(f"Invalid value {value!r} for '{key}', using default {default!r}")
    return default
