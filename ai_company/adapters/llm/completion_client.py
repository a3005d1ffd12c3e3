"""OpenAI-compatible chat completions client using aiohttp. Implements CompletionPort."""

import asyncio
import errno
import json
import sys
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

import aiohttp

from ai_company.domain.errors import ProviderError
from ai_company.domain.personas import PLACEHOLDER_TEXT

TRANSIENT_STATUSES = (408, 429)
_TRANSIENT_MARKERS = ("timed out", "timeout", "econnreset", "socket hang up")


def _log(msg: str):
    print(msg, file=sys.stderr)


@dataclass(frozen=True)
class RetryPolicy:
    """Linear backoff: wait ``base_delay * (attempt + 1)`` seconds after failed attempt ``attempt``."""

    max_retries: int = 2
    base_delay: float = 1.0

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def delay(self, attempt: int) -> float:
        return self.base_delay * (attempt + 1)


def is_transient(error: BaseException) -> bool:
    """Whether a failed completion attempt is worth retrying."""
    status = getattr(error, "status", None)
    if isinstance(status, int):
        return status in TRANSIENT_STATUSES or status >= 500

    # ServerDisconnectedError: hang-up before the response; ClientPayloadError: mid-body.
    if isinstance(
        error,
        (asyncio.TimeoutError, ConnectionResetError, aiohttp.ServerDisconnectedError, aiohttp.ClientPayloadError),
    ):
        return True
    if isinstance(error, OSError) and error.errno == errno.ECONNRESET:
        return True
    msg = str(error).lower()
    return any(marker in msg for marker in _TRANSIENT_MARKERS)


def normalize_content(content: Any) -> str:
    """Turn a message ``content`` field (string or list of parts) into text."""
    if isinstance(content, str):
        return content.strip() or PLACEHOLDER_TEXT

    if isinstance(content, list):
        texts = [
            part["text"]
            for part in content
            if isinstance(part, dict) and isinstance(part.get("text"), str)
        ]
        return "\n".join(texts).strip() or PLACEHOLDER_TEXT

    return PLACEHOLDER_TEXT


def _extract_content(data: Any) -> Any:
    try:
        return data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None


def _parse_json(body: str) -> Any:
    try:
        return json.loads(body)
    except ValueError:
        return None


def _error_message(data: Any, fallback: str) -> str:
    if isinstance(data, dict):
        err = data.get("error")
        if isinstance(err, dict) and err.get("message"):
            return str(err["message"])
        if isinstance(err, str) and err:
            return err
    return fallback


class CompletionClient:
    """Chat completions with a per-attempt timeout and retry on transient failures."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout_ms: int = 90000,
        retry_policy: Optional[RetryPolicy] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        if not model:
            raise ValueError("model identifier must not be empty")
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout_ms = timeout_ms
        self.retry_policy = retry_policy or RetryPolicy()
        self._sleep = sleep

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/chat/completions"

    async def complete(self, instruction: str, user_text: str) -> str:
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": instruction},
                {"role": "user", "content": user_text},
            ],
        }
        policy = self.retry_policy
        attempt = 0

        while True:
            try:
                return await self._request(payload)
            except ProviderError as e:
                e.attempts = attempt + 1
                if attempt + 1 >= policy.max_attempts or not is_transient(e):
                    raise
                error: Exception = e
            except Exception as e:
                if attempt + 1 >= policy.max_attempts or not is_transient(e):
                    raise self._wrap(e, attempt + 1) from e
                error = e

            delay = policy.delay(attempt)
            _log(
                f"[llm] AI request failed (attempt {attempt + 1}/{policy.max_attempts}), "
                f"retrying in {delay:g}s: {error}"
            )
            await self._sleep(delay)
            attempt += 1

    async def _request(self, payload: dict) -> str:
        headers = {"Authorization": f"Bearer {self.api_key}"}
        timeout = aiohttp.ClientTimeout(total=self.timeout_ms / 1000)

        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(self.endpoint, json=payload, headers=headers) as resp:
                body = await resp.text()
                data = _parse_json(body)
                if resp.status >= 400:
                    fallback = body[:200] or f"request failed with status {resp.status}"
                    raise ProviderError(_error_message(data, fallback), status=resp.status)

        return normalize_content(_extract_content(data))

    @staticmethod
    def _wrap(error: Exception, attempts: int) -> ProviderError:
        status = getattr(error, "status", None)
        message = str(error) or type(error).__name__
        return ProviderError(message, status=status if isinstance(status, int) else None, attempts=attempts)
