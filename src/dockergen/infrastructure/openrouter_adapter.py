"""OpenRouter adapter implementing the LlmGateway port.

OpenRouter speaks the OpenAI chat-completions protocol, so the official
``openai`` SDK is pointed at its base URL.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from openai import (
    APIConnectionError,
    APIError,
    APIStatusError,
    APITimeoutError,
    AsyncOpenAI,
)

from dockergen.domain.exceptions import LlmError

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Failed to generate Dockerfile"


class OpenRouterAdapter:
    """Concrete ``LlmGateway`` backed by the OpenRouter chat-completions API."""

    def __init__(
        self,
        api_key: str,
        *,
        model: str,
        base_url: str = "https://openrouter.ai/api/v1",
        site_url: str = "http://localhost:8000",
        app_title: str = "DockerGen - AI Dockerfile Generator",
        temperature: float = 0.7,
        max_tokens: int = 2000,
        timeout: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            default_headers={"HTTP-Referer": site_url, "X-Title": app_title},
            http_client=http_client,
        )
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Send a system + user prompt and return the first completion's text."""
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except APIStatusError as exc:
            message = _upstream_message(exc.body) or GENERIC_FAILURE_MESSAGE
            logger.error("OpenRouter returned HTTP %d: %s", exc.status_code, message)
            raise LlmError(message) from exc
        except APITimeoutError as exc:
            logger.error("OpenRouter request timed out")
            raise LlmError("The model provider did not respond in time") from exc
        except APIConnectionError as exc:
            logger.error("OpenRouter connection error: %s", exc)
            raise LlmError(GENERIC_FAILURE_MESSAGE) from exc
        except APIError as exc:
            logger.error("OpenRouter returned an unusable response: %s", exc)
            raise LlmError(GENERIC_FAILURE_MESSAGE) from exc

        choices = getattr(response, "choices", None)
        if not choices:
            # OpenRouter may report provider errors inside a 200 body.
            message = _upstream_message(getattr(response, "error", None))
            logger.error("OpenRouter returned no choices: %s", message)
            raise LlmError(message or GENERIC_FAILURE_MESSAGE)

        choice_message = getattr(choices[0], "message", None)
        return getattr(choice_message, "content", None) or ""

    async def close(self) -> None:
        """Release underlying HTTP resources."""
        await self._client.close()


def _upstream_message(body: Any) -> str | None:
    """Pull ``message`` out of an OpenAI-style error body, if there is one."""
    if isinstance(body, dict):
        if isinstance(body.get("error"), dict):
            body = body["error"]
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None
