"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from portfolio_twin.chat.dispatcher import ResponseDispatcher
from portfolio_twin.chat.orchestrator import ChatOrchestrator, create_orchestrator
from portfolio_twin.chat.store import InMemorySessionStore
from portfolio_twin.config.schema import AppConfig

LLM_BASE_URL = "http://llm.test/v1"


@pytest.fixture
def default_config() -> AppConfig:
    """Provide a default configuration for tests."""
    return AppConfig()


@pytest.fixture
def config() -> AppConfig:
    """Configuration pointing at a fake provider with an inline key."""
    config = AppConfig()
    config.provider.base_url = LLM_BASE_URL
    config.provider.api_key = "test-key"
    return config


@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def dispatcher() -> MagicMock:
    """Dispatcher double that answers every general question the same way."""
    mock = MagicMock(spec=ResponseDispatcher)
    mock.dispatch = AsyncMock(return_value="It's always sunny in General Santos!")
    return mock


@pytest.fixture
def orchestrator(config, store, dispatcher) -> ChatOrchestrator:
    return create_orchestrator(config, store=store, dispatcher=dispatcher)
