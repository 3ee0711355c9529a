"""Inbound port: platform-agnostic message representation."""

from dataclasses import dataclass


@dataclass
class IncomingMessage:
    """Discord/CLI-agnostic chat message, alive for one event callback."""

    content: str
    channel_id: int
    author_name: str
    author_id: int
    is_bot: bool
