#!/usr/bin/env python3
"""
Plugin entry points: wires configuration, listener and webhook dispatcher into a host.
"""

import logging
from typing import Optional

from .config.loader import config_path, load_config, validate_config
from .config.models import Config, ConfigurationError
from .discord_bot.webhook import WebhookDispatcher
from .events.listener import CommandListener
from .host.executor import AsyncioBackgroundExecutor
from .host.interfaces import BackgroundExecutor, Host
from .observability.logger import structured_logger

logger = logging.getLogger(__name__)


class CommandLoggerPlugin:
    """Forwards every executed command to a Discord webhook."""

    def __init__(self, host: Host):
        self.host = host
        self.config: Optional[Config] = None
        self.listener: Optional[CommandListener] = None
        self.enabled = False
        self._executor: Optional[BackgroundExecutor] = None
        self._owns_executor = False

    def on_enable(self) -> bool:
        """
        Load configuration and register the command listener.

        Returns False, and disables the plugin through the host, when no
        webhook URL is configured. No listener is registered in that case.
        """
        path = config_path(self.host.data_dir)
        self.config = load_config(self.host.data_dir)

        try:
            validate_config(self.config, path)
        except ConfigurationError as e:
            structured_logger.error(str(e), config_path=str(path))
            self.host.disable_plugin(self)
            return False

        self._executor = getattr(self.host, "executor", None)
        if self._executor is None:
            self._executor = AsyncioBackgroundExecutor()
            self._owns_executor = True

        dispatcher = WebhookDispatcher(
            self.config.webhook_url,
            self._executor,
            verify_tls=self.config.verify_tls,
        )
        self.listener = CommandListener(self.config, dispatcher, motd=self.host.motd)
        self.host.events.register(self.listener.on_command)

        self.enabled = True
        structured_logger.info(
            "Discord Command Logger enabled",
            message_style=self.config.message_style,
            log_player_commands=self.config.log_player_commands,
            log_console_commands=self.config.log_console_commands,
        )
        return True

    def on_disable(self) -> None:
        structured_logger.info("Discord Command Logger disabled")
        if self._owns_executor and self._executor is not None:
            self._executor.shutdown()
        self._executor = None
        self._owns_executor = False
        self.enabled = False
