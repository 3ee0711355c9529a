"""Command dispatcher: routes chat commands to the inference and news ports.

Each inbound message is handled independently. While one command awaits its
outbound call, the gateway keeps delivering events, so two commands can be in
flight at once and their replies may go out in a different order than the
messages arrived. Nothing serializes per channel or per user.
"""

import sys
from typing import Optional

from relaybot.domain.commands import (
    HELP_TEXT,
    USAGE_HINT,
    Command,
    CommandKind,
    parse_command,
    truncate_reply,
)
from relaybot.ports.inbound import IncomingMessage
from relaybot.ports.outbound import InferencePort, NewsPort, ReplyChannel


def _log(msg: str):
    print(msg, file=sys.stderr)


class CommandDispatcher:
    """Matches `!ai`, `!news` and `!help` and sends exactly one reply per match."""

    def __init__(self, inference: InferencePort, news: NewsPort):
        self.inference = inference
        self.news = news

    async def handle(self, message: IncomingMessage, channel: ReplyChannel) -> Optional[Command]:
        """Process one message. Returns the command acted on, or None."""
        if message.is_bot:
            return None

        command = parse_command(message.content)
        if command is None:
            return None

        _log(f"[relaybot] {command.kind.value} from {message.author_name} in ch={message.channel_id}")

        if command.kind is CommandKind.AI:
            await self._handle_ai(command, channel)
        elif command.kind is CommandKind.NEWS:
            await self._handle_news(command, channel)
        else:
            await channel.reply(HELP_TEXT)
        return command

    async def _handle_ai(self, command: Command, channel: ReplyChannel):
        if not command.argument:
            await channel.reply(USAGE_HINT)
            return
        await channel.send_typing()
        reply = await self.inference.generate(command.argument)
        await channel.reply(truncate_reply(reply))

    async def _handle_news(self, command: Command, channel: ReplyChannel):
        await channel.send_typing()
        # Not truncated: three long titles/URLs could exceed the message limit.
        reply = await self.news.headlines(command.argument)
        await channel.reply(reply)
