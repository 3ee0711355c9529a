"""Outbound ports: interfaces for external system adapters."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class InferencePort(Protocol):
    """Text-generation backend. Failures come back as a sentinel string."""

    async def generate(self, prompt: str) -> str: ...


@runtime_checkable
class NewsPort(Protocol):
    """News-search backend. Failures come back as a sentinel string."""

    @property
    def is_configured(self) -> bool: ...

    async def headlines(self, topic: str) -> str: ...


@runtime_checkable
class ReplyChannel(Protocol):
    """The conversation a command came from."""

    async def send_typing(self) -> None: ...
    async def reply(self, text: str) -> None: ...
