"""Command events and the listener forwarding them to Discord."""

from .models import CommandEvent, ConsoleSender, PlayerSender, Sender

__all__ = ["CommandEvent", "ConsoleSender", "PlayerSender", "Sender"]
