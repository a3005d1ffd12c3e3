"""Outbound ports — interfaces for external system adapters."""

from typing import Iterable, Optional, Protocol, runtime_checkable


@runtime_checkable
class CompletionPort(Protocol):
    """Interface for the completion service."""

    async def complete(self, instruction: str, user_text: str) -> str: ...


@runtime_checkable
class TextChannelPort(Protocol):
    """A guild channel. Only channels with ``supports_text_send`` accept posts."""

    @property
    def name(self) -> str: ...

    @property
    def supports_text_send(self) -> bool: ...

    async def send(self, text: str) -> None: ...


@runtime_checkable
class GuildPort(Protocol):
    """The group a message was posted in."""

    @property
    def id(self) -> int: ...

    async def refresh_channels(self) -> None: ...

    def channels(self) -> Iterable[TextChannelPort]: ...


@runtime_checkable
class MessageHandlePort(Protocol):
    """Opaque handle on a received message."""

    @property
    def guild(self) -> Optional[GuildPort]: ...

    async def reply(self, text: str) -> None: ...

    async def send(self, text: str) -> None:
        """Post in the message's channel without replying."""
