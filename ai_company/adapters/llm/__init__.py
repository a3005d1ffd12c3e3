"""LLM adapters — OpenAI-compatible completion client."""

from ai_company.adapters.llm.completion_client import (
    CompletionClient,
    RetryPolicy,
    is_transient,
    normalize_content,
)

__all__ = [
    "CompletionClient",
    "RetryPolicy",
    "is_transient",
    "normalize_content",
]
