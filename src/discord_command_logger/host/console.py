"""
Standalone host that reads a server console.

Lines in the server log format ``[12:00:00 INFO]: Steve issued server command: /home``
become player commands. Other log lines are ignored, and anything else is
treated as a command typed into the console.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..events.models import CommandEvent, ConsoleSender, PlayerSender
from .interfaces import BackgroundExecutor, CommandHandler

logger = logging.getLogger(__name__)

PLAYER_COMMAND_RE = re.compile(r"\]: (?P<name>[A-Za-z0-9_.]{1,32}) issued server command: (?P<command>.+)$")
LOG_LINE_RE = re.compile(r"^\[[^\]]*\d{2}:\d{2}:\d{2}[^\]]*\]")


def parse_console_line(line: str) -> Optional[CommandEvent]:
    line = line.strip()
    if not line:
        return None

    match = PLAYER_COMMAND_RE.search(line)
    if match:
        return CommandEvent(PlayerSender(match.group("name")), match.group("command"))

    if LOG_LINE_RE.match(line):
        return None

    # Typed at the console prompt
    if line.startswith(">"):
        line = line[1:].strip()
    return CommandEvent(ConsoleSender(), line) if line else None


class ConsoleEventSource:
    """Event source fed line by line from a server console."""

    def __init__(self):
        self._handlers: List[CommandHandler] = []

    def register(self, handler: CommandHandler) -> None:
        self._handlers.append(handler)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)

    def emit(self, event: CommandEvent) -> None:
        for handler in self._handlers:
            handler(event)

    def feed(self, line: str) -> Optional[CommandEvent]:
        """Parse one console line and deliver the resulting command, if any."""
        event = parse_console_line(line)
        if event is not None:
            self.emit(event)
        return event

    def feed_lines(self, lines: Iterable[str]) -> int:
        count = 0
        for line in lines:
            if self.feed(line) is not None:
                count += 1
        return count


class ConsoleHost:
    """Minimal host for running the plugin outside a game server."""

    def __init__(
        self,
        data_dir: Union[str, Path],
        motd: str = "A Minecraft Server",
        executor: Optional[BackgroundExecutor] = None,
    ):
        self.data_dir = Path(data_dir)
        self.motd = motd
        self.events = ConsoleEventSource()
        self.executor = executor
        self.disabled_plugins = []

    def disable_plugin(self, plugin) -> None:
        logger.info(f"Disabling plugin {type(plugin).__name__}")
        self.disabled_plugins.append(plugin)
