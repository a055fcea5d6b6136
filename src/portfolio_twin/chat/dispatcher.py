"""Forward open-ended questions to the configured chat-completion model."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from openai import OpenAIError

from portfolio_twin.config.schema import AppConfig
from portfolio_twin.errors import ExternalServiceError
from portfolio_twin.llm.client import LLMClient, Message
from portfolio_twin.llm.factory import create_llm_client

logger = logging.getLogger(__name__)


class ResponseDispatcher:
    """Builds the model request for a turn and returns the reply text.

    The LLM client is created on first use, so a missing API key fails the
    turn that needs the model instead of the whole application.
    """

    def __init__(self, config: AppConfig, client: LLMClient | None = None):
        """Initialize the dispatcher.

        Args:
            config: Application configuration (persona prompt, history window, model)
            client: Pre-built LLM client; created from config when omitted
        """
        self.config = config
        self._client = client

    @property
    def system_prompt(self) -> str:
        return self.config.persona.system_prompt

    def build_messages(self, prompt: str, history: Sequence[Message]) -> list[Message]:
        """Assemble system prompt, windowed history and the current prompt.

        Args:
            prompt: Current user message
            history: Prior messages of the session, oldest first

        Returns:
            Messages in the order they are sent to the model
        """
        window = self.config.chat.history_window
        recent = list(history)[-window:] if window else []

        messages = [Message(role="system", content=self.system_prompt)]
        messages.extend(Message(role=item.role, content=item.content) for item in recent)

        if prompt and prompt.strip():
            messages.append(Message(role="user", content=prompt.strip()))

        return messages

    async def dispatch(self, prompt: str, history: Sequence[Message]) -> str:
        """Send one completion request and return the trimmed reply.

        Args:
            prompt: Current user message
            history: Prior messages of the session, oldest first

        Returns:
            Reply text

        Raises:
            MissingCredentialsError: If no API key is configured
            ExternalServiceError: If the request fails or the reply is empty
        """
        client = self._get_client()
        messages = self.build_messages(prompt, history)

        logger.info(
            "Requesting chat completion | model=%s | messages=%d",
            self.config.model.name,
            len(messages),
        )

        try:
            response = await client.complete(
                messages,
                temperature=self.config.model.temperature,
                max_tokens=self.config.model.max_tokens,
                top_p=self.config.model.top_p,
            )
        except (OpenAIError, ValueError) as e:
            raise ExternalServiceError(f"Chat completion failed: {e}") from e

        content = response.content.strip()
        if not content:
            raise ExternalServiceError("Empty response from chat completion provider")

        logger.info("Chat completion succeeded | length=%d", len(content))
        return content

    async def aclose(self) -> None:
        """Close the LLM client if one was created."""
        if self._client is not None:
            await self._client.close()
            self._client = None

    def _get_client(self) -> LLMClient:
        if self._client is None:
            self._client = create_llm_client(self.config)
        return self._client
