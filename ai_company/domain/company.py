"""CompanyBrain — routing and fan-out logic, no framework dependencies.

Receives platform-agnostic IncomingMessage objects from the Discord adapter,
classifies them and runs the CEO broadcast or a single department reply.
"""

import sys
from typing import Awaitable, Callable, Dict, Optional, Sequence

from ai_company.domain.chunker import DISCORD_MAX_LENGTH
from ai_company.domain.errors import ChannelResolutionError, ProviderError, RelaySendError
from ai_company.domain.models import Classification, EventKind, RoleProfile
from ai_company.domain.personas import (
    CEO_ACK_TEXT,
    CEO_CHANNEL,
    CEO_GUIDANCE_TEXT,
    DEPARTMENT_GUIDANCE_TEXT,
    DEPARTMENTS,
    FALLBACK_TEXT,
)
from ai_company.domain.relay import reply_all, send_all
from ai_company.domain.router import classify
from ai_company.ports.inbound import IncomingMessage
from ai_company.ports.outbound import CompletionPort, GuildPort, TextChannelPort


def _log(msg: str):
    print(msg, file=sys.stderr)


async def resolve_channel(guild: GuildPort, name: str) -> TextChannelPort:
    """Find a sendable channel called ``name``, refreshing the guild's list first."""
    try:
        await guild.refresh_channels()
    except Exception as e:
        # Stale cache is still worth searching.
        _log(f"[discord] failed to fetch channels for guild {guild.id}: {e}")

    for channel in guild.channels():
        if channel.supports_text_send and channel.name == name:
            return channel
    raise ChannelResolutionError(name, guild.id)


class CompanyBrain:
    """Pure company logic — no discord import, testable with mock ports.

    Handles:
    - Classification (CEO trigger / department / ignored)
    - CEO broadcast to every department channel
    - Department Q&A replies
    - Last-resort error containment per event
    """

    def __init__(
        self,
        completion: CompletionPort,
        departments: Sequence[RoleProfile] = DEPARTMENTS,
        trigger_channel: str = CEO_CHANNEL,
        max_message_length: int = DISCORD_MAX_LENGTH,
    ):
        self.completion = completion
        self.departments = tuple(departments)
        self.trigger_channel = trigger_channel
        self.max_message_length = max_message_length
        self._handlers: Dict[EventKind, Callable[[IncomingMessage, Classification], Awaitable[None]]] = {
            EventKind.TRIGGER: self._on_trigger,
            EventKind.DEPARTMENT: self._on_department,
        }

    def classify(self, msg: IncomingMessage) -> Classification:
        return classify(msg, self.trigger_channel, self.departments)

    async def handle(self, msg: IncomingMessage) -> None:
        """Dispatch one message. Never raises."""
        try:
            classification = self.classify(msg)
            handler = self._handlers.get(classification.kind)
            if handler is None:
                return
            await handler(msg, classification)
        except Exception as e:
            _log(f"[#{msg.channel_name}] unhandled error for message from {msg.author_name}: {e!r}")

    async def _on_trigger(self, msg: IncomingMessage, _: Classification) -> None:
        await self.broadcast(msg)

    async def _on_department(self, msg: IncomingMessage, classification: Classification) -> None:
        await self.answer(msg, classification.department)

    async def broadcast(self, msg: IncomingMessage) -> None:
        """Fan a CEO instruction out to every department channel, in declared order."""
        instruction = (msg.content or "").strip()
        if not instruction:
            await reply_all(msg.handle, CEO_GUIDANCE_TEXT, self.max_message_length)
            return

        await reply_all(msg.handle, CEO_ACK_TEXT, self.max_message_length)

        guild = msg.handle.guild
        if guild is None:
            _log(f"[{self.trigger_channel}] message has no guild handle, nothing to fan out")
            return

        for department in self.departments:
            await self._run_department(guild, department, instruction)

    async def _run_department(self, guild: GuildPort, department: RoleProfile, instruction: str) -> None:
        name = department.channel_name
        try:
            channel = await resolve_channel(guild, name)
        except ChannelResolutionError as e:
            _log(f"[{self.trigger_channel}] {e}, skipping")
            return

        response = await self._complete_or_fallback(department, instruction)
        try:
            await send_all(channel, response, self.max_message_length)
        except RelaySendError as e:
            _log(f"[{name}] relay failed: {e}")

    async def answer(self, msg: IncomingMessage, department: Optional[RoleProfile]) -> None:
        """Reply to a message posted directly in a department channel."""
        user_input = (msg.content or "").strip()
        if not user_input:
            await reply_all(msg.handle, DEPARTMENT_GUIDANCE_TEXT, self.max_message_length)
            return

        response = await self._complete_or_fallback(department, user_input)
        await reply_all(msg.handle, response, self.max_message_length)

    async def _complete_or_fallback(self, department: RoleProfile, user_text: str) -> str:
        try:
            return await self.completion.complete(department.instruction, user_text)
        except ProviderError as e:
            _log(f"[{department.channel_name}] generation failed after {e.attempts} attempt(s): {e}")
            return FALLBACK_TEXT
