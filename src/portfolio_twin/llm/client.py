"""LLM client protocol and data types."""

from dataclasses import dataclass
from typing import Protocol


@dataclass
class Message:
    """A message in the conversation."""

    role: str  # "system", "user", "assistant"
    content: str


@dataclass
class CompletionResponse:
    """Response from LLM completion."""

    content: str
    finish_reason: str = "stop"


class LLMClient(Protocol):
    """Protocol for LLM client implementations."""

    async def complete(
        self,
        messages: list[Message],
        temperature: float | None = None,
        max_tokens: int | None = None,
        top_p: float | None = None,
    ) -> CompletionResponse:
        """Generate a completion from the LLM.

        Args:
            messages: Conversation history, system prompt first
            temperature: Sampling temperature override
            max_tokens: Maximum tokens to generate
            top_p: Nucleus sampling override

        Returns:
            CompletionResponse with the reply text
        """
        ...

    async def close(self) -> None:
        """Release network resources held by the client."""
        ...
