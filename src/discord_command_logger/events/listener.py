#!/usr/bin/env python3
"""
Command event listener: filters commands and hands them to the webhook dispatcher.
"""

import logging
from typing import Any, Callable, Dict

from ..config.models import Config
from ..discord_bot.embeds.command_log import build_payload
from ..discord_bot.webhook import WebhookDispatcher
from ..observability.metrics import metrics
from .models import CommandEvent, ConsoleSender, describe_sender, normalize_command

logger = logging.getLogger(__name__)

PayloadBuilder = Callable[..., Dict[str, Any]]


class CommandListener:
    """Handles the host's command events. Never blocks and never raises into the host."""

    def __init__(
        self,
        config: Config,
        dispatcher: WebhookDispatcher,
        motd: str = "",
        formatter: PayloadBuilder = build_payload,
    ):
        self.config = config
        self.dispatcher = dispatcher
        self.motd = motd
        self.formatter = formatter

    def is_enabled_for(self, event: CommandEvent) -> bool:
        if isinstance(event.sender, ConsoleSender):
            return self.config.log_console_commands
        return self.config.log_player_commands

    def on_command(self, event: CommandEvent) -> None:
        """Forward one executed command to Discord if its sender kind is logged."""
        try:
            metrics.increment_commands_seen()

            if not self.is_enabled_for(event):
                metrics.increment_commands_skipped()
                return

            command = normalize_command(event.command)
            if not command:
                metrics.increment_commands_skipped()
                logger.debug("Ignoring empty command")
                return

            executor, type_label = describe_sender(event.sender)
            payload = self.formatter(executor, command, type_label, self.config, self.motd)
            self.dispatcher.dispatch(payload)
        except Exception as e:
            logger.error(f"Error handling command event {event!r}: {e}", exc_info=True)
