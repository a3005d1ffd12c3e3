"""Port interfaces (Hexagonal Architecture)."""

from ai_company.ports.inbound import IncomingMessage
from ai_company.ports.outbound import CompletionPort, GuildPort, MessageHandlePort, TextChannelPort

__all__ = [
    "IncomingMessage",
    "CompletionPort",
    "GuildPort",
    "MessageHandlePort",
    "TextChannelPort",
]
