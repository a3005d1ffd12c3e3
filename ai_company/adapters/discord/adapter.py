"""Discord adapter — bridges discord.Client to CompanyBrain.

The wrappers below implement the outbound ports on top of discord.py objects,
and CompanyBot converts each discord.Message into an IncomingMessage before
handing it to the brain.
"""

import sys
from typing import Iterable, List, Optional

import discord

from ai_company.config import AppConfig
from ai_company.domain.company import CompanyBrain
from ai_company.ports.inbound import IncomingMessage


def _log(msg: str):
    print(msg, file=sys.stderr)


class DiscordTextChannel:
    """TextChannelPort implementation over a discord guild channel."""

    def __init__(self, channel):
        self._channel = channel

    @property
    def name(self) -> str:
        return self._channel.name

    @property
    def supports_text_send(self) -> bool:
        return isinstance(self._channel, discord.abc.Messageable)

    async def send(self, text: str) -> None:
        await self._channel.send(text)


class DiscordGuild:
    """GuildPort implementation over discord.Guild."""

    def __init__(self, guild: discord.Guild):
        self._guild = guild
        self._fetched: Optional[List] = None

    @property
    def id(self) -> int:
        return self._guild.id

    async def refresh_channels(self) -> None:
        self._fetched = list(await self._guild.fetch_channels())

    def channels(self) -> Iterable[DiscordTextChannel]:
        source = self._fetched if self._fetched is not None else self._guild.channels
        return [DiscordTextChannel(ch) for ch in source]


class DiscordMessageHandle:
    """MessageHandlePort implementation over discord.Message."""

    def __init__(self, message: discord.Message):
        self._message = message
        self._guild = DiscordGuild(message.guild) if message.guild else None

    @property
    def guild(self) -> Optional[DiscordGuild]:
        return self._guild

    async def reply(self, text: str) -> None:
        await self._message.reply(text)

    async def send(self, text: str) -> None:
        await self._message.channel.send(text)


def to_incoming(message: discord.Message) -> IncomingMessage:
    """Convert a Discord message to platform-agnostic IncomingMessage."""
    return IncomingMessage(
        content=message.content or "",
        channel_id=message.channel.id,
        channel_name=getattr(message.channel, "name", None) or "",
        guild_id=message.guild.id if message.guild else None,
        author_name=str(message.author),
        is_bot=message.author.bot,
        handle=DiscordMessageHandle(message),
    )


class CompanyBot(discord.Client):
    """Thin Discord client that delegates every message to CompanyBrain."""

    def __init__(self, brain: CompanyBrain, config: AppConfig, **discord_kwargs):
        intents = discord.Intents.default()
        intents.guilds = True
        intents.guild_messages = True
        intents.message_content = True
        super().__init__(intents=intents, **discord_kwargs)
        self._brain = brain
        self._config = config

    async def on_ready(self):
        _log(f"[discord] logged in as {self.user}")
        _log(f"[discord] using completion API base URL: {self._config.base_url}")
        _log(f"[discord] using model: {self._config.model}")
        _log(f"[discord] AI timeout: {self._config.timeout_ms}ms, retries: {self._config.max_retries}")

    async def on_message(self, message: discord.Message):
        try:
            incoming = to_incoming(message)
        except Exception as e:
            _log(f"[discord] could not read message {getattr(message, 'id', '?')}: {e!r}")
            return
        await self._brain.handle(incoming)
