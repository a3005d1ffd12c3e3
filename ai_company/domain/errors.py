"""Error taxonomy shared by the domain and its adapters."""

from typing import Optional


class CompanyError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(CompanyError):
    """Required configuration is missing or malformed. Fatal at startup."""


class ProviderError(CompanyError):
    """Completion service call failed (after retries, when the failure was transient)."""

    def __init__(self, message: str, status: Optional[int] = None, attempts: int = 1):
        super().__init__(message)
        self.message = message
        self.status = status
        self.attempts = attempts

    def __str__(self) -> str:
        if self.status is not None:
            return f"HTTP {self.status}: {self.message}"
        return self.message


class ChannelResolutionError(CompanyError):
    """A department channel could not be found in the guild."""

    def __init__(self, channel_name: str, guild_id: Optional[int] = None):
        super().__init__(f"Channel #{channel_name} not found in guild {guild_id}")
        self.channel_name = channel_name
        self.guild_id = guild_id


class RelaySendError(CompanyError):
    """Posting a chunk to Discord failed."""
