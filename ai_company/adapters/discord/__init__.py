"""Discord adapters — client, port wrappers and launcher."""

from ai_company.adapters.discord.adapter import (
    CompanyBot,
    DiscordGuild,
    DiscordMessageHandle,
    DiscordTextChannel,
    to_incoming,
)

__all__ = [
    "CompanyBot",
    "DiscordGuild",
    "DiscordMessageHandle",
    "DiscordTextChannel",
    "to_incoming",
]
