"""Domain layer: pure Python, no framework dependencies."""

from relaybot.domain.commands import (
    HELP_TEXT,
    USAGE_HINT,
    Command,
    CommandKind,
    parse_command,
    truncate_reply,
)
from relaybot.domain.dispatcher import CommandDispatcher
from relaybot.domain.generation import Generation, GenerationKind, decode_generation
from relaybot.domain.headlines import NewsArticle, format_headlines, top_articles

__all__ = [
    "HELP_TEXT",
    "USAGE_HINT",
    "Command",
    "CommandKind",
    "CommandDispatcher",
    "Generation",
    "GenerationKind",
    "NewsArticle",
    "decode_generation",
    "format_headlines",
    "parse_command",
    "top_articles",
    "truncate_reply",
]
