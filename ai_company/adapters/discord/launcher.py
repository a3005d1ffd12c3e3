"""Launcher for the AI company Discord bot."""

import asyncio
import sys

import discord

from ai_company.adapters.discord.adapter import CompanyBot
from ai_company.adapters.llm.completion_client import CompletionClient, RetryPolicy
from ai_company.config import AppConfig
from ai_company.domain.company import CompanyBrain
from ai_company.domain.errors import ConfigurationError
from ai_company.domain.personas import DEPARTMENTS


def _log(msg: str):
    print(msg, file=sys.stderr)


def build_bot(config: AppConfig) -> CompanyBot:
    """Wire the completion client, brain and Discord client together."""
    completion = CompletionClient(
        api_key=config.api_key,
        model=config.model,
        base_url=config.base_url,
        timeout_ms=config.timeout_ms,
        retry_policy=RetryPolicy(max_retries=config.max_retries),
    )
    brain = CompanyBrain(
        completion,
        departments=DEPARTMENTS,
        trigger_channel=config.trigger_channel,
        max_message_length=config.max_message_length,
    )
    return CompanyBot(brain, config)


async def run(config: AppConfig) -> int:
    """Run the bot until disconnect. Returns the process exit code."""
    bot = build_bot(config)
    try:
        async with bot:
            await bot.start(config.discord_token)
    except discord.LoginFailure as e:
        _log(f"Discord login failed: {e}")
        return 1
    except (discord.HTTPException, discord.GatewayNotFound, OSError) as e:
        _log(f"Discord connection failed: {e}")
        return 1
    return 0


def main() -> None:
    try:
        config = AppConfig.from_env()
    except ConfigurationError as e:
        _log(str(e))
        sys.exit(1)

    sys.exit(asyncio.run(run(config)))


if __name__ == "__main__":
    main()
