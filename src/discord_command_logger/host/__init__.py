"""Host integration: interfaces the plugin needs and a standalone console host."""

from .interfaces import BackgroundExecutor, EventSource, Host
from .executor import AsyncioBackgroundExecutor

__all__ = ["BackgroundExecutor", "EventSource", "Host", "AsyncioBackgroundExecutor"]
