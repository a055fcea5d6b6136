"""Configuration loading and validation."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from portfolio_twin.config.schema import AppConfig, ProviderConfig

DEFAULT_CONFIG_PATH = Path.home() / ".portfolio-twin" / "portfolio-twin.yaml"

CONFIG_PATH_ENV = "PORTFOLIO_TWIN_CONFIG"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ConfigError(Exception):
    """Configuration loading or validation error."""


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Path to config file. If None, uses $PORTFOLIO_TWIN_CONFIG or the
              default location. If the file doesn't exist, returns defaults.

    Returns:
        Validated configuration object

    Raises:
        ConfigError: If config file exists but is invalid
    """
    if path is None:
        env_path = os.getenv(CONFIG_PATH_ENV)
        path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

    if not path.exists():
        return AppConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            return AppConfig()

        return AppConfig(**config_data)

    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed: {e}") from e
    except Exception as e:
        raise ConfigError(f"Failed to load config from {path}: {e}") from e


def save_config(config: AppConfig, path: Optional[Union[str, Path]] = None) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration object to save
        path: Destination path (string or Path object). If None, uses default location.
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
    elif isinstance(path, str):
        path = Path(path)

    path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config.model_dump()

    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(
            config_dict, f, default_flow_style=False, sort_keys=False, allow_unicode=True
        )


def resolve_secret(value: str | None, env_name: str) -> str | None:
    """Return an inline setting, falling back to the named environment variable."""
    if value:
        return value
    return os.getenv(env_name) or None


def resolve_api_key(provider: ProviderConfig) -> str | None:
    """Return the provider API key, preferring the inline value over the environment."""
    return resolve_secret(provider.api_key, provider.api_key_env)


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the package logger."""
    package_logger = logging.getLogger("portfolio_twin")
    package_logger.setLevel(level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
