"""Tests for the typed AppConfig dataclass and env loading."""

import pytest

from ai_company.config import (
    DEFAULT_BASE_URL,
    AppConfig,
    normalize_base_url,
)
from ai_company.domain.chunker import DISCORD_MAX_LENGTH
from ai_company.domain.company import CompanyBrain
from ai_company.domain.errors import ConfigurationError
from ai_company.domain.personas import CEO_CHANNEL, DEPARTMENTS


BASE_ENV = {
    "DISCORD_TOKEN": "discord-token",
    "LLM_API_KEY": "sk-test",
    "LLM_MODEL": "gpt-4o-mini",
}


class TestNormalizeBaseUrl:
    def test_default_when_empty(self):
        assert normalize_base_url("") == DEFAULT_BASE_URL
        assert normalize_base_url(None) == DEFAULT_BASE_URL
        assert normalize_base_url("   ") == DEFAULT_BASE_URL

    def test_strips_trailing_slashes(self):
        assert normalize_base_url("https://api.example.com/v1///") == "https://api.example.com/v1"

    def test_appends_version(self):
        assert normalize_base_url("https://api.example.com/") == "https://api.example.com/v1"
        assert normalize_base_url("https://proxy.local/openai") == "https://proxy.local/openai/v1"


class TestAppConfig:
    def test_defaults(self):
        c = AppConfig()
        assert c.timeout_ms == 90000
        assert c.max_retries == 2
        assert c.max_message_length == 2000
        assert c.trigger_channel == "ceo"

    def test_channel_names_and_limit_shared_with_domain(self):
        c = AppConfig()
        brain = CompanyBrain(completion=None)
        assert c.trigger_channel == CEO_CHANNEL == brain.trigger_channel
        assert c.max_message_length == DISCORD_MAX_LENGTH == brain.max_message_length
        assert CEO_CHANNEL not in [d.channel_name for d in DEPARTMENTS]
        assert not hasattr(c, "channels")

    def test_from_env(self):
        c = AppConfig.from_env(dict(BASE_ENV, LLM_BASE_URL="https://llm.example.com/", LLM_TIMEOUT_MS="30000"))
        assert c.discord_token == "discord-token"
        assert c.api_key == "sk-test"
        assert c.model == "gpt-4o-mini"
        assert c.base_url == "https://llm.example.com/v1"
        assert c.timeout_ms == 30000
        assert c.max_retries == 2

    def test_legacy_silra_names(self):
        env = {
            "DISCORD_TOKEN": "t",
            "SILRA_API_KEY": "legacy-key",
            "SILRA_MODEL": "legacy-model",
            "SILRA_MAX_RETRIES": "5",
        }
        c = AppConfig.from_env(env)
        assert c.api_key == "legacy-key"
        assert c.model == "legacy-model"
        assert c.max_retries == 5
        assert c.base_url == DEFAULT_BASE_URL

    def test_new_names_win_over_legacy(self):
        c = AppConfig.from_env(dict(BASE_ENV, SILRA_MODEL="old"))
        assert c.model == "gpt-4o-mini"

    @pytest.mark.parametrize("missing", ["DISCORD_TOKEN", "LLM_API_KEY", "LLM_MODEL"])
    def test_missing_required(self, missing):
        env = {k: v for k, v in BASE_ENV.items() if k != missing}
        with pytest.raises(ConfigurationError) as exc_info:
            AppConfig.from_env(env)
        assert missing in str(exc_info.value)

    def test_blank_model_is_missing(self):
        with pytest.raises(ConfigurationError):
            AppConfig.from_env(dict(BASE_ENV, LLM_MODEL="   "))

    def test_reports_every_problem(self):
        with pytest.raises(ConfigurationError) as exc_info:
            AppConfig.from_env({"LLM_TIMEOUT_MS": "soon"})
        message = str(exc_info.value)
        for name in ("DISCORD_TOKEN", "LLM_API_KEY", "LLM_MODEL", "LLM_TIMEOUT_MS"):
            assert name in message

    def test_rejects_bad_numbers(self):
        with pytest.raises(ConfigurationError):
            AppConfig.from_env(dict(BASE_ENV, LLM_TIMEOUT_MS="0"))
        with pytest.raises(ConfigurationError):
            AppConfig.from_env(dict(BASE_ENV, LLM_MAX_RETRIES="-1"))

    def test_zero_retries_allowed(self):
        assert AppConfig.from_env(dict(BASE_ENV, LLM_MAX_RETRIES="0")).max_retries == 0
