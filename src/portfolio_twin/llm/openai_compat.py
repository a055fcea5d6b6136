"""Client for OpenAI-compatible chat-completion endpoints."""

from typing import Any

from openai import AsyncOpenAI

from portfolio_twin.llm.client import CompletionResponse, Message


class OpenAICompatibleClient:
    """LLM client for any OpenAI-compatible ``/chat/completions`` endpoint.

    Groq, OpenAI and most self-hosted servers accept the same request body,
    so switching providers is a matter of changing ``base_url`` and the key.
    Requests are never retried; a failure surfaces after at most ``timeout``
    seconds.
    """

    def __init__(
        self,
        model: str,
        base_url: str,
        api_key: str,
        timeout: int = 30,
        temperature: float = 0.7,
        max_tokens: int = 1024,
        top_p: float = 1.0,
    ) -> None:
        """Initialise the client.

        Args:
            model: Model name served by the provider.
            base_url: OpenAI-compatible endpoint (must include the version path).
            api_key: Bearer token for the provider.
            timeout: Request timeout in seconds.
            temperature: Default sampling temperature.
            max_tokens: Default output token limit.
            top_p: Default nucleus sampling mass.
        """
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.top_p = top_p
        self.client = AsyncOpenAI(
            base_url=base_url,
            api_key=api_key,
            timeout=timeout,
            max_retries=0,
        )

    def _convert_messages(self, messages: list[Message]) -> list[dict[str, Any]]:
        """Convert internal Message format to OpenAI format."""
        return [{"role": msg.role, "content": msg.content} for msg in messages]

    async def complete(
        self,
        messages: list[Message],
        temperature: float | None = None,
        max_tokens: int | None = None,
        top_p: float | None = None,
    ) -> CompletionResponse:
        """Generate a completion.

        Args:
            messages: Conversation history, system prompt first.
            temperature: Sampling temperature override.
            max_tokens: Maximum tokens to generate.
            top_p: Nucleus sampling override.

        Returns:
            CompletionResponse with the first choice's content.
        """
        params: dict[str, Any] = {
            "model": self.model,
            "messages": self._convert_messages(messages),
            "temperature": temperature if temperature is not None else self.temperature,
            "max_tokens": max_tokens or self.max_tokens,
            "top_p": top_p if top_p is not None else self.top_p,
        }

        response = await self.client.chat.completions.create(**params)

        # A non-JSON 2xx body comes back from the SDK as a plain string.
        choices = getattr(response, "choices", None)
        if not choices:
            return CompletionResponse(content="", finish_reason="empty")

        choice = choices[0]
        message = getattr(choice, "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str):
            return CompletionResponse(content="", finish_reason="empty")

        return CompletionResponse(
            content=content,
            finish_reason=getattr(choice, "finish_reason", None) or "stop",
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.close()
