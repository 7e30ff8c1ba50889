"""Command line entry point for running the plugin against a server console."""

import logging
import sys
from pathlib import Path

import typer

from .config.loader import config_path, load_config, validate_config
from .config.models import ConfigurationError
from .discord_bot.embeds.command_log import build_payload
from .discord_bot.webhook import WebhookDispatcher
from .events.models import CONSOLE_COMMAND
from .host.console import ConsoleHost
from .host.executor import AsyncioBackgroundExecutor
from .observability.metrics import metrics
from .plugin import CommandLoggerPlugin

app = typer.Typer(help="Forward Minecraft server commands to a Discord webhook")

logger = logging.getLogger(__name__)

DataDirOption = typer.Option(Path("plugin_data"), "--data-dir", help="Directory holding config.json")
MotdOption = typer.Option("A Minecraft Server", "--motd", help="Server MOTD shown in embed footers")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@app.command()
def run(data_dir: Path = DataDirOption, motd: str = MotdOption) -> None:
    """Read console lines from stdin and forward executed commands until EOF."""
    configure_logging(load_config(data_dir).log_level)

    host = ConsoleHost(data_dir, motd=motd)
    plugin = CommandLoggerPlugin(host)
    if not plugin.on_enable():
        raise typer.Exit(code=1)

    logger.info("Reading server console from stdin...")
    try:
        host.events.feed_lines(sys.stdin)
    except KeyboardInterrupt:
        pass
    finally:
        plugin.on_disable()
        logger.info(f"Metrics: {metrics.snapshot()}")


@app.command()
def test(data_dir: Path = DataDirOption, motd: str = MotdOption) -> None:
    """Post a sample console command embed to the configured webhook."""
    config = load_config(data_dir)
    configure_logging(config.log_level)
    try:
        validate_config(config, config_path(data_dir))
    except ConfigurationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    executor = AsyncioBackgroundExecutor()
    try:
        dispatcher = WebhookDispatcher(config.webhook_url, executor, verify_tls=config.verify_tls)
        payload = build_payload("Console", "/say Discord Command Logger test", CONSOLE_COMMAND, config, motd)
        result = dispatcher.dispatch(payload).result()
    finally:
        executor.shutdown()

    if not result.ok:
        typer.echo(f"❌ Test message failed (HTTP: {result.status}): {result.error}", err=True)
        raise typer.Exit(code=1)
    typer.echo("✅ Test message posted successfully!")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
