"""Forward Minecraft server commands to a Discord channel through a webhook."""

from .plugin import CommandLoggerPlugin

__version__ = "1.0.0"

__all__ = ["CommandLoggerPlugin", "__version__"]
