"""LLM client implementations."""

from .client import CompletionResponse, LLMClient, Message
from .factory import create_llm_client
from .openai_compat import OpenAICompatibleClient

__all__ = [
    "CompletionResponse",
    "LLMClient",
    "Message",
    "OpenAICompatibleClient",
    "create_llm_client",
]
