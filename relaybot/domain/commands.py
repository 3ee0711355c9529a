"""Chat command parsing.

Pure Python, no framework dependencies.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Discord rejects messages longer than this
MESSAGE_LIMIT = 2000
TRUNCATED_LENGTH = 1990
ELLIPSIS = "…"

AI_RE = re.compile(r"^!ai\s*", re.IGNORECASE)
NEWS_RE = re.compile(r"^!news\s*", re.IGNORECASE)
HELP_COMMAND = "!help"

USAGE_HINT = "Usage: `!ai your question here`"
HELP_TEXT = (
    "Commands:\n"
    "• `!ai <text>` — AI reply (Hugging Face)\n"
    "• `!news <topic>` — Latest news"
)


class CommandKind(Enum):
    AI = "ai"
    NEWS = "news"
    HELP = "help"


@dataclass(frozen=True)
class Command:
    """A recognised chat command and its trimmed argument."""

    kind: CommandKind
    argument: str = ""


def parse_command(content: str) -> Optional[Command]:
    """Match message text against the known prefixes, in priority order.

    Anything else, including near misses like ``!ay``, yields None.
    """
    text = content.strip()

    if AI_RE.match(text):
        return Command(CommandKind.AI, AI_RE.sub("", text, count=1).strip())
    if NEWS_RE.match(text):
        return Command(CommandKind.NEWS, NEWS_RE.sub("", text, count=1).strip())
    if text == HELP_COMMAND:
        return Command(CommandKind.HELP)
    return None


def truncate_reply(text: str, limit: int = MESSAGE_LIMIT, keep: int = TRUNCATED_LENGTH) -> str:
    """Fit text into a single chat message: first `keep` chars plus an ellipsis."""
    if len(text) <= limit:
        return text
    return text[:keep] + ELLIPSIS
