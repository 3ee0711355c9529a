"""Port interfaces (Hexagonal Architecture)."""

from relaybot.ports.inbound import IncomingMessage
from relaybot.ports.outbound import InferencePort, NewsPort, ReplyChannel

__all__ = [
    "IncomingMessage",
    "InferencePort",
    "NewsPort",
    "ReplyChannel",
]
