"""Factory for creating the configured LLM client."""

from portfolio_twin.config.loader import resolve_api_key
from portfolio_twin.config.schema import AppConfig
from portfolio_twin.errors import MissingCredentialsError
from portfolio_twin.llm.openai_compat import OpenAICompatibleClient


def create_llm_client(config: AppConfig) -> OpenAICompatibleClient:
    """Create an LLM client from configuration.

    Args:
        config: Application configuration

    Returns:
        Client bound to the configured provider and sampling parameters

    Raises:
        MissingCredentialsError: If no API key is configured
    """
    api_key = resolve_api_key(config.provider)
    if not api_key:
        raise MissingCredentialsError(
            f"Missing {config.provider.api_key_env} in environment variables"
        )

    return OpenAICompatibleClient(
        model=config.model.name,
        base_url=config.provider.base_url,
        api_key=api_key,
        timeout=config.provider.timeout,
        temperature=config.model.temperature,
        max_tokens=config.model.max_tokens,
        top_p=config.model.top_p,
    )
