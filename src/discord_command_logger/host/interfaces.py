"""Contracts between the plugin and the game server hosting it."""

from __future__ import annotations

from concurrent.futures import Future
from pathlib import Path
from typing import Any, Callable, Coroutine, Optional, Protocol

from ..events.models import CommandEvent

CommandHandler = Callable[[CommandEvent], None]


class EventSource(Protocol):
    """Delivers executed commands to registered handlers."""

    def register(self, handler: CommandHandler) -> None:
        """Call ``handler`` for every command executed from now on."""


class BackgroundExecutor(Protocol):
    """Runs work off the host's main thread."""

    def submit(self, coro: Coroutine[Any, Any, Any]) -> Future:
        """Schedule ``coro`` and return immediately."""

    def shutdown(self, timeout: Optional[float] = None) -> None:
        """Let in-flight work finish, then release the worker."""


class Host(Protocol):
    """The server the plugin is loaded into."""

    data_dir: Path
    motd: str
    events: EventSource
    executor: Optional[BackgroundExecutor]

    def disable_plugin(self, plugin: Any) -> None:
        """Mark ``plugin`` as disabled."""
