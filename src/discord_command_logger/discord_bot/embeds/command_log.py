"""
Helper module for building the webhook payloads posted for executed commands.
Both the embed and the plain-text style are built here so the listener and the
`test` CLI command produce identical messages.
"""

from __future__ import annotations
from datetime import datetime
from typing import Any, Dict, Optional, TYPE_CHECKING

import discord

from ...events.models import CONSOLE_COMMAND
from ...utils.timezone import format_timestamp, now_in_timezone

if TYPE_CHECKING:
    from ...config.models import Config

WEBHOOK_USERNAME = "Command Logger"
WEBHOOK_AVATAR_URL = "https://cdn.discordapp.com/attachments/123456789/123456789/bot_avatar.png"
FOOTER_ICON_URL = "https://cdn.discordapp.com/attachments/123456789/123456789/minecraft_icon.png"

EMBED_TITLE = "🔧 Command Executed"
EXECUTOR_FIELD = "👤 Executor"
COMMAND_FIELD = "⚡ Command"
TIME_FIELD = "🕐 Time"
TYPE_FIELD = "📍 Type"


def embed_color(type_label: str, config: Config) -> int:
    """Console commands use the console color, everything else the player color."""
    if type_label == CONSOLE_COMMAND:
        return config.embed_color_console
    return config.embed_color_player


def build_command_embed(
    executor: str,
    command: str,
    type_label: str,
    config: Config,
    motd: str,
    now: datetime,
) -> discord.Embed:
    """
    Build the Discord embed describing one executed command.

    Fields are always Executor, Command, Time and Type, in that order.
    """
    embed = discord.Embed(
        title=EMBED_TITLE,
        color=embed_color(type_label, config),
        timestamp=now,
    )
    embed.add_field(name=EXECUTOR_FIELD, value=executor, inline=True)
    embed.add_field(name=COMMAND_FIELD, value=f"```{command}```", inline=False)
    embed.add_field(name=TIME_FIELD, value=format_timestamp(now), inline=True)
    embed.add_field(name=TYPE_FIELD, value=type_label, inline=True)
    embed.set_footer(text=f"Server: {motd}", icon_url=FOOTER_ICON_URL)
    return embed


def build_embed_payload(
    executor: str,
    command: str,
    type_label: str,
    config: Config,
    motd: str = "",
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    if now is None:
        now = now_in_timezone(config.timezone)
    embed = build_command_embed(executor, command, type_label, config, motd, now)
    return {
        "username": WEBHOOK_USERNAME,
        "avatar_url": WEBHOOK_AVATAR_URL,
        "embeds": [embed.to_dict()],
    }


def build_plain_payload(
    executor: str,
    command: str,
    type_label: str,
    config: Config,
    motd: str = "",
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    if now is None:
        now = now_in_timezone(config.timezone)
    stamp = now.strftime(config.timestamp_format)
    return {
        "username": WEBHOOK_USERNAME,
        "content": f"{stamp} COMMAND: `{command}` was sent by **{executor}**",
    }


def build_payload(
    executor: str,
    command: str,
    type_label: str,
    config: Config,
    motd: str = "",
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Build the payload in the configured message style."""
    if config.message_style == "plain":
        return build_plain_payload(executor, command, type_label, config, motd, now)
    return build_embed_payload(executor, command, type_label, config, motd, now)
