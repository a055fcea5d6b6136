"""Exception hierarchy for the chat turn pipeline."""

from typing import Any


class PortfolioTwinError(Exception):
    """Base class for portfolio-twin errors."""


class ChatValidationError(PortfolioTwinError):
    """A chat request failed validation (HTTP 400)."""

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.details = details or []


class ExternalServiceError(PortfolioTwinError):
    """The chat-completion provider could not produce a reply."""


class MissingCredentialsError(ExternalServiceError):
    """No API key is configured for the chat-completion provider."""
