"""Discord adapter: bridges discord.Client to CommandDispatcher.

RelayBot converts each discord.Message into an IncomingMessage and hands it to
the dispatcher together with a DiscordReplyChannel for the response.
"""

import sys

import discord

from relaybot.domain.dispatcher import CommandDispatcher
from relaybot.ports.inbound import IncomingMessage


def _log(msg: str):
    print(msg, file=sys.stderr)


class DiscordReplyChannel:
    """ReplyChannel implementation bound to the originating discord.Message."""

    def __init__(self, message: discord.Message):
        self._message = message

    async def send_typing(self) -> None:
        await self._message.channel.typing()

    async def reply(self, text: str) -> None:
        await self._message.reply(text)


class RelayBot(discord.Client):
    """Gateway session: receives guild messages and relays commands."""

    def __init__(self, dispatcher: CommandDispatcher, **discord_kwargs):
        intents = discord.Intents.none()
        intents.guilds = True
        intents.guild_messages = True
        intents.message_content = True
        super().__init__(intents=intents, **discord_kwargs)
        self.dispatcher = dispatcher

    @staticmethod
    def to_incoming(message: discord.Message) -> IncomingMessage:
        """Convert a Discord message to platform-agnostic IncomingMessage."""
        return IncomingMessage(
            content=message.content,
            channel_id=message.channel.id,
            author_name=str(message.author),
            author_id=message.author.id,
            is_bot=message.author.bot,
        )

    async def on_ready(self):
        _log(f"[relaybot] Logged in as {self.user}")

    async def on_message(self, message: discord.Message):
        await self.dispatcher.handle(self.to_incoming(message), DiscordReplyChannel(message))
