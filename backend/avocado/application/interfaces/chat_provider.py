"""Chat provider port used by the AI gateway.

Only non-streaming completions are needed: the gateway sends one user
prompt and reads back the whole reply.
"""

from abc import ABC, abstractmethod
from typing import Any

from avocado.domain.entities import ChatMessage, ChatCompletionResult


class ChatProvider(ABC):
    """Port for a hosted LLM reachable over a chat-completions API."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Short provider id, e.g. ``openrouter``."""
        ...

    @abstractmethod
    async def complete(
        self,
        messages: list[ChatMessage],
        model: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
        response_format: dict[str, Any] | None = None,
    ) -> ChatCompletionResult:
        """Return the model's reply to ``messages``.

        ``response_format`` takes the OpenAI structured-output shape
        (``{"type": "json_schema", ...}``) and is passed through as-is.

        Raises:
            ChatProviderError: the provider answered with an error.
            httpx.HTTPError: the provider could not be reached.
        """
        ...
