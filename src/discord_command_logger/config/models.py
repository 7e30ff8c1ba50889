#!/usr/bin/env python3
"""
Configuration models for the Discord Command Logger plugin.
"""

from dataclasses import dataclass, fields
from typing import Any

DEFAULT_PLAYER_COLOR = 65280
DEFAULT_CONSOLE_COLOR = 16711680

MESSAGE_STYLES = ("embed", "plain")


class ConfigurationError(ValueError):
    """Raised when the plugin cannot be activated with the loaded settings."""


@dataclass(frozen=True)
class Config:
    """Configuration settings for the plugin."""

    # Discord settings
    webhook_url: str = ""

    # Toggles
    log_player_commands: bool = True
    log_console_commands: bool = True

    # Message settings
    embed_color_player: int = DEFAULT_PLAYER_COLOR
    embed_color_console: int = DEFAULT_CONSOLE_COLOR
    message_style: str = "embed"
    timestamp_format: str = "[%Y-%m-%d %H:%M:%S]"
    timezone: str = ""

    # HTTP settings
    verify_tls: bool = True

    # Logging settings
    log_level: str = "info"

    def get(self, key: str, default: Any = None) -> Any:
        """Read a setting by its config file key, e.g. ``log-player-commands``."""
        return getattr(self, key_to_field(key), default)

    def to_file_dict(self) -> dict:
        """Return the settings keyed the way they are written to disk."""
        return {field_to_key(f.name): getattr(self, f.name) for f in fields(self)}


def key_to_field(key: str) -> str:
    return key.replace("-", "_")


def field_to_key(name: str) -> str:
    return name.replace("_", "-")
