"""Pydantic models for portfolio-twin.yaml configuration."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from portfolio_twin.config import defaults


class ModelConfig(BaseModel):
    """Sampling parameters for the chat-completion model."""

    name: str = Field(default="llama-3.1-8b-instant", description="Model identifier at the provider")
    temperature: float = Field(default=0.7, description="Sampling temperature", ge=0.0, le=2.0)
    max_tokens: int = Field(default=1024, description="Maximum output tokens", ge=1)
    top_p: float = Field(default=1.0, description="Nucleus sampling mass", ge=0.0, le=1.0)


class ProviderConfig(BaseModel):
    """OpenAI-compatible chat-completion provider."""

    base_url: str = Field(
        default="https://api.groq.com/openai/v1",
        description="Provider endpoint (must include the API version path)",
    )
    api_key_env: str = Field(
        default="GROQ_API_KEY",
        description="Environment variable holding the bearer token",
    )
    api_key: str | None = Field(
        default=None,
        description="Inline API key; overrides api_key_env when set",
    )
    timeout: int = Field(default=30, description="Request timeout in seconds", ge=1)


class ChatConfig(BaseModel):
    """Chat turn pipeline configuration."""

    max_message_length: int = Field(
        default=1000, description="Maximum accepted message length", ge=1
    )
    history_window: int = Field(
        default=50,
        description="Maximum number of prior messages forwarded to the model",
        ge=0,
    )
    apology_message: str = Field(
        default=defaults.APOLOGY_MESSAGE,
        description="Reply used when the model provider cannot answer",
    )


class PersonaConfig(BaseModel):
    """Everything the assistant knows about the portfolio owner."""

    name: str = defaults.OWNER_NAME
    title: str = defaults.OWNER_TITLE
    availability: str = defaults.OWNER_AVAILABILITY
    bio: str = defaults.OWNER_BIO
    image_url: str = defaults.PROFILE_IMAGE_URL
    system_prompt: str = Field(
        default=defaults.SYSTEM_PROMPT,
        description="System prompt sent ahead of every model request",
    )
    personal_triggers: list[str] = Field(
        default_factory=lambda: list(defaults.PERSONAL_TRIGGERS),
        description="Substrings that mark a message as a question about the owner",
    )
    quick_answers: dict[str, str] = Field(
        default_factory=lambda: dict(defaults.QUICK_ANSWERS),
        description="Canned answers keyed by the exact quick-question text",
    )
    quick_fallback: str = Field(
        default=defaults.QUICK_FALLBACK,
        description="Answer for quick questions missing from quick_answers",
    )
    skills: list[dict[str, Any]] = Field(default_factory=lambda: list(defaults.SKILL_GROUPS))
    projects: list[dict[str, Any]] = Field(default_factory=lambda: list(defaults.PROJECTS))
    contact: dict[str, str] = Field(default_factory=lambda: dict(defaults.CONTACT))


class ContactConfig(BaseModel):
    """Contact form delivery over SMTP."""

    smtp_host: str = Field(default="smtp.gmail.com", description="SMTP server host")
    smtp_port: int = Field(default=587, description="SMTP server port", ge=1, le=65535)
    start_tls: bool = Field(default=True, description="Upgrade the connection with STARTTLS")
    timeout: int = Field(default=10, description="SMTP timeout in seconds", ge=1)
    username_env: str = Field(
        default="EMAIL_ADDRESS",
        description="Environment variable holding the sending mailbox (also the From address)",
    )
    password_env: str = Field(
        default="EMAIL_PASSWORD",
        description="Environment variable holding the mailbox password",
    )
    receiver_env: str = Field(
        default="RECEIVER_EMAIL",
        description="Environment variable holding the owner's inbox",
    )
    username: str | None = Field(default=None, description="Inline sender; overrides username_env")
    password: str | None = Field(default=None, description="Inline password; overrides env")
    receiver: str | None = Field(default=None, description="Inline inbox; overrides receiver_env")
    auto_reply: bool = Field(default=True, description="Send a confirmation to the visitor")
    thanks_message: str = Field(
        default=defaults.CONTACT_THANKS,
        description="Success text; {name} is replaced by the visitor's name",
    )
    failure_message: str = Field(
        default=defaults.CONTACT_FAILURE,
        description="Error text when the message could not be delivered",
    )


class ServerConfig(BaseModel):
    """API server configuration."""

    host: str = Field(default="127.0.0.1", description="Server bind address")
    port: int = Field(default=8000, description="Server port", ge=1, le=65535)
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins (use ['*'] for development only)",
    )


class LoggingConfig(BaseModel):
    """Log output configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")


class AppConfig(BaseModel):
    """Root configuration schema for portfolio-twin."""

    model: ModelConfig = Field(default_factory=ModelConfig)
    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    chat: ChatConfig = Field(default_factory=ChatConfig)
    persona: PersonaConfig = Field(default_factory=PersonaConfig)
    contact: ContactConfig = Field(default_factory=ContactConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
