#!/usr/bin/env python3
"""
Unit tests for plugin enable/disable.
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from discord_command_logger.host.console import ConsoleHost
from discord_command_logger.plugin import CommandLoggerPlugin
from tests.conftest import WEBHOOK_URL


@pytest.fixture
def executor():
    executor = MagicMock()
    # Close submitted coroutines so they are not reported as never awaited
    executor.submit.side_effect = lambda coro: coro.close()
    return executor


class TestEnable:
    """Test plugin activation."""

    def test_first_run_without_webhook_disables(self, tmp_path, executor, caplog):
        host = ConsoleHost(tmp_path, executor=executor)
        plugin = CommandLoggerPlugin(host)

        assert plugin.on_enable() is False

        assert host.disabled_plugins == [plugin]
        assert host.events.handler_count == 0
        assert plugin.enabled is False
        assert (tmp_path / "config.json").exists()
        assert "Webhook URL not configured" in caplog.text

    def test_unreadable_config_disables_cleanly(self, tmp_path, executor):
        (tmp_path / "config.json").mkdir()
        host = ConsoleHost(tmp_path, executor=executor)
        plugin = CommandLoggerPlugin(host)

        assert plugin.on_enable() is False

        assert host.disabled_plugins == [plugin]
        assert host.events.handler_count == 0

    def test_disabled_plugin_ignores_commands(self, write_config, executor):
        host = ConsoleHost(write_config(**{"webhook-url": ""}), executor=executor)
        plugin = CommandLoggerPlugin(host)
        plugin.on_enable()

        host.events.feed("[12:00:00 INFO]: Steve issued server command: /spawn")
        host.events.feed("stop")

        executor.submit.assert_not_called()

    def test_enable_registers_listener(self, write_config, executor):
        host = ConsoleHost(write_config(**{"webhook-url": WEBHOOK_URL}), executor=executor)
        plugin = CommandLoggerPlugin(host)

        assert plugin.on_enable() is True

        assert plugin.enabled is True
        assert host.events.handler_count == 1
        assert host.disabled_plugins == []

    def test_commands_reach_executor(self, write_config, executor):
        host = ConsoleHost(write_config(**{"webhook-url": WEBHOOK_URL}), executor=executor)
        plugin = CommandLoggerPlugin(host)
        plugin.on_enable()

        host.events.feed("[12:00:00 INFO]: Steve issued server command: /spawn")
        host.events.feed("stop")

        assert executor.submit.call_count == 2

    def test_console_toggle_respected(self, write_config, executor):
        data_dir = write_config(**{"webhook-url": WEBHOOK_URL, "log-console-commands": False})
        host = ConsoleHost(data_dir, executor=executor)
        plugin = CommandLoggerPlugin(host)
        plugin.on_enable()

        host.events.feed("stop")
        host.events.feed("[12:00:00 INFO]: Steve issued server command: /spawn")

        assert executor.submit.call_count == 1

    def test_listener_uses_host_motd(self, write_config, executor):
        host = ConsoleHost(write_config(**{"webhook-url": WEBHOOK_URL}), motd="Skyblock", executor=executor)
        plugin = CommandLoggerPlugin(host)
        plugin.on_enable()

        assert plugin.listener.motd == "Skyblock"
        assert plugin.listener.dispatcher.verify_tls is True

    def test_tls_opt_out_passed_to_dispatcher(self, write_config, executor):
        data_dir = write_config(**{"webhook-url": WEBHOOK_URL, "verify-tls": False})
        host = ConsoleHost(data_dir, executor=executor)
        plugin = CommandLoggerPlugin(host)
        plugin.on_enable()

        assert plugin.listener.dispatcher.verify_tls is False


class TestDisable:
    """Test plugin shutdown."""

    def test_disable_keeps_host_executor(self, write_config, executor, caplog):
        caplog.set_level(logging.INFO)
        host = ConsoleHost(write_config(**{"webhook-url": WEBHOOK_URL}), executor=executor)
        plugin = CommandLoggerPlugin(host)
        plugin.on_enable()

        plugin.on_disable()

        executor.shutdown.assert_not_called()
        assert plugin.enabled is False
        assert "Discord Command Logger disabled" in caplog.text

    @patch("discord_command_logger.plugin.AsyncioBackgroundExecutor")
    def test_disable_shuts_down_own_executor(self, executor_cls, write_config):
        host = ConsoleHost(write_config(**{"webhook-url": WEBHOOK_URL}))
        plugin = CommandLoggerPlugin(host)
        plugin.on_enable()

        plugin.on_disable()

        executor_cls.return_value.shutdown.assert_called_once()
