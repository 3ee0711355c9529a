"""Discord gateway adapter."""

from relaybot.adapters.discord.bot import DiscordReplyChannel, RelayBot

__all__ = [
    "DiscordReplyChannel",
    "RelayBot",
]
