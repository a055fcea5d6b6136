"""Initialize command - default config generation."""

from pathlib import Path

from rich.console import Console
from rich.panel import Panel

from portfolio_twin.config.loader import DEFAULT_CONFIG_PATH, save_config
from portfolio_twin.config.schema import AppConfig

console = Console()


def init_command(force: bool = False, config_path: str | None = None) -> None:
    """Write the default configuration.

    Args:
        force: Overwrite existing config if present
        config_path: Destination path; default location when None
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if path.exists() and not force:
        console.print(f"[yellow]Config already exists at {path}[/yellow]")
        console.print("Use [bold]--force[/bold] to overwrite.")
        return

    config = AppConfig()
    save_config(config, path)

    console.print(
        Panel.fit(
            f"[bold green]Configuration written[/bold green]\n"
            f"Path: {path}\n"
            f"Model: {config.model.name}\n"
            f"API key variable: {config.provider.api_key_env}",
            border_style="green",
        )
    )
