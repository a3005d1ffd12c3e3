"""Configuration loaded from the environment (and .env)."""

__version__ = "0.1.0"

import os
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from dotenv import load_dotenv

from ai_company.domain.chunker import DISCORD_MAX_LENGTH
from ai_company.domain.errors import ConfigurationError
from ai_company.domain.personas import CEO_CHANNEL

load_dotenv()

DEFAULT_BASE_URL = "https://api.silra.cn/v1"
DEFAULT_TIMEOUT_MS = 90000
DEFAULT_MAX_RETRIES = 2

# setting -> env var names, first one set wins (SILRA_* kept for older deployments)
ENV_KEYS: Dict[str, Tuple[str, ...]] = {
    "discord_token": ("DISCORD_TOKEN",),
    "api_key": ("LLM_API_KEY", "SILRA_API_KEY"),
    "base_url": ("LLM_BASE_URL", "SILRA_BASE_URL"),
    "model": ("LLM_MODEL", "SILRA_MODEL"),
    "timeout_ms": ("LLM_TIMEOUT_MS", "SILRA_TIMEOUT_MS"),
    "max_retries": ("LLM_MAX_RETRIES", "SILRA_MAX_RETRIES"),
}


def normalize_base_url(url: Optional[str]) -> str:
    """Strip trailing slashes and make sure the URL ends in /v1."""
    trimmed = (url or "").strip().rstrip("/")
    if not trimmed:
        return DEFAULT_BASE_URL
    return trimmed if trimmed.endswith("/v1") else f"{trimmed}/v1"


def _lookup(environ: Mapping[str, str], setting: str) -> str:
    for key in ENV_KEYS[setting]:
        value = environ.get(key, "").strip()
        if value:
            return value
    return ""


def _parse_int(
    environ: Mapping[str, str], setting: str, default: int, errors: List[str], minimum: int = 0
) -> int:
    raw = _lookup(environ, setting)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        errors.append(f"{ENV_KEYS[setting][0]} must be an integer, got {raw!r}")
        return default
    if value < minimum:
        errors.append(f"{ENV_KEYS[setting][0]} must be at least {minimum}, got {value}")
        return default
    return value


@dataclass
class AppConfig:
    """Typed process configuration. Read once at startup."""

    discord_token: str = ""
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    model: str = ""
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    max_retries: int = DEFAULT_MAX_RETRIES
    max_message_length: int = DISCORD_MAX_LENGTH
    trigger_channel: str = CEO_CHANNEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Build the config, raising ConfigurationError listing every problem."""
        env = os.environ if environ is None else environ
        errors: List[str] = []

        discord_token = _lookup(env, "discord_token")
        if not discord_token:
            errors.append("Missing DISCORD_TOKEN in environment variables.")
        api_key = _lookup(env, "api_key")
        if not api_key:
            errors.append("Missing LLM_API_KEY in environment variables.")
        model = _lookup(env, "model")
        if not model:
            errors.append(
                "Missing LLM_MODEL in environment variables. "
                "Your provider requires an explicit model name (for example: gpt-4o-mini)."
            )

        timeout_ms = _parse_int(env, "timeout_ms", DEFAULT_TIMEOUT_MS, errors, minimum=1)
        max_retries = _parse_int(env, "max_retries", DEFAULT_MAX_RETRIES, errors)

        if errors:
            raise ConfigurationError("\n".join(errors))

        return cls(
            discord_token=discord_token,
            api_key=api_key,
            base_url=normalize_base_url(_lookup(env, "base_url")),
            model=model,
            timeout_ms=timeout_ms,
            max_retries=max_retries,
        )
