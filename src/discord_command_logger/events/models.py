#!/usr/bin/env python3
"""
Command event models.
"""

from dataclasses import dataclass
from typing import Tuple, Union

CONSOLE_EXECUTOR = "Console"
CONSOLE_COMMAND = "Console Command"
PLAYER_COMMAND = "Player Command"


@dataclass(frozen=True)
class ConsoleSender:
    """The server console."""


@dataclass(frozen=True)
class PlayerSender:
    """An in-game player."""

    name: str


Sender = Union[ConsoleSender, PlayerSender]


@dataclass(frozen=True)
class CommandEvent:
    """A command executed on the server, as delivered by the host."""

    sender: Sender
    command: str


def describe_sender(sender: Sender) -> Tuple[str, str]:
    """
    Map a sender to its executor name and type label.

    Raises:
        TypeError: If the sender is neither console nor player
    """
    if isinstance(sender, ConsoleSender):
        return CONSOLE_EXECUTOR, CONSOLE_COMMAND
    if isinstance(sender, PlayerSender):
        return sender.name, PLAYER_COMMAND
    raise TypeError(f"Unsupported command sender: {sender!r}")


def normalize_command(command: str) -> str:
    """Strip whitespace and make sure the command starts with '/'."""
    command = command.strip()
    if command and not command.startswith("/"):
        command = "/" + command
    return command
