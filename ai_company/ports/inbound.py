"""Inbound port — platform-agnostic message representation."""

from dataclasses import dataclass
from typing import Optional

from ai_company.ports.outbound import MessageHandlePort


@dataclass(frozen=True)
class IncomingMessage:
    """Discord-agnostic view of one received chat message."""

    content: str
    channel_id: int
    channel_name: str
    guild_id: Optional[int]  # None for direct messages
    author_name: str
    is_bot: bool
    handle: MessageHandlePort
