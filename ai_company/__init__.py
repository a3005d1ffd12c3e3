"""AI Company — Discord relay between executive channels and an LLM."""

from ai_company.config import AppConfig, normalize_base_url
from ai_company.domain.company import CompanyBrain
from ai_company.domain.chunker import split_message
from ai_company.domain.errors import (
    ChannelResolutionError,
    ConfigurationError,
    ProviderError,
    RelaySendError,
)
from ai_company.adapters.llm.completion_client import CompletionClient, RetryPolicy

__all__ = [
    "AppConfig",
    "normalize_base_url",
    "CompanyBrain",
    "split_message",
    "ChannelResolutionError",
    "ConfigurationError",
    "ProviderError",
    "RelaySendError",
    "CompletionClient",
    "RetryPolicy",
]
