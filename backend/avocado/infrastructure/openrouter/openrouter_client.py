"""OpenRouter adapter for the ChatProvider port.

Sends non-streaming ``/chat/completions`` requests with httpx. Structured
output is requested by passing an OpenAI-style ``response_format``.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx

from avocado.application.interfaces.chat_provider import ChatProvider
from avocado.domain.entities import ChatMessage, ChatCompletionResult, TokenUsage
from avocado.domain.exceptions import ChatProviderError, MissingCredentialError
from avocado.infrastructure.logging.colored_logger import OperationLogger, OperationStage

oplog = OperationLogger("OpenRouterClient")

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
REQUEST_TIMEOUT_S = 120.0


class OpenRouterClient(ChatProvider):
    """Infrastructure adapter for the OpenRouter API.

    An injected ``http_client`` is reused and left open (tests pass one
    built on ``httpx.MockTransport``); without one, each request gets a
    short-lived client.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        app_name: str = "Avocado Projects",
        http_client: httpx.AsyncClient | None = None,
    ):
        if not api_key or not api_key.strip():
            raise MissingCredentialError("openrouter")
        self._api_key = api_key.strip()
        self._endpoint = f"{base_url.rstrip('/')}/chat/completions"
        self._app_name = app_name
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return "openrouter"

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http_client is not None:
            yield self._http_client
            return
        async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT_S) as client:
            yield client

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "X-Title": self._app_name,
        }

    @staticmethod
    def _payload(
        messages: list[ChatMessage],
        model: str,
        options: dict[str, Any],
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
        }
        # Unset options are omitted so the provider applies its own defaults.
        payload.update({k: v for k, v in options.items() if v is not None})
        return payload

    async def complete(
        self,
        messages: list[ChatMessage],
        model: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
        response_format: dict[str, Any] | None = None,
    ) -> ChatCompletionResult:
        payload = self._payload(
            messages,
            model,
            {
                "temperature": temperature,
                "max_tokens": max_tokens,
                "response_format": response_format,
            },
        )

        with oplog.timed_step(OperationStage.AI, "chat completion", model=model):
            async with self._client() as client:
                response = await client.post(self._endpoint, headers=self._headers(), json=payload)
            if response.status_code != 200:
                raise self._provider_error(response)
            result = self._parse(response.json())

        oplog.detail(
            "usage",
            tokens=result.usage.total_tokens,
            cost=result.usage.cost,
            finish=result.finish_reason,
        )
        return result

    def _parse(self, data: dict[str, Any]) -> ChatCompletionResult:
        """Map the OpenRouter JSON body onto a ChatCompletionResult."""
        if "error" in data:
            error = data["error"]
            raise ChatProviderError(
                self.provider_name, error.get("code", 500), error.get("message", "Unknown error")
            )

        choices = data.get("choices") or []
        if not choices:
            raise ChatProviderError(self.provider_name, 500, "No choices in response")

        choice = choices[0]
        usage = data.get("usage") or {}
        return ChatCompletionResult(
            model=data.get("model", ""),
            content=(choice.get("message") or {}).get("content") or "",
            finish_reason=choice.get("finish_reason") or "stop",
            usage=TokenUsage(
                prompt_tokens=usage.get("prompt_tokens", 0),
                completion_tokens=usage.get("completion_tokens", 0),
                total_tokens=usage.get("total_tokens", 0),
                cost=usage.get("cost"),
            ),
            provider=self.provider_name,
        )

    def _provider_error(self, response: httpx.Response) -> ChatProviderError:
        try:
            message = response.json().get("error", {}).get("message", response.text)
        except (ValueError, AttributeError):
            message = response.text
        return ChatProviderError(self.provider_name, response.status_code, message)
