"""Server management commands."""

from pathlib import Path

import httpx
from rich.console import Console

from portfolio_twin.config.loader import configure_logging, load_config

console = Console()


def start_command(config_path: str | None = None) -> None:
    """Start the chat API server in the foreground.

    Args:
        config_path: Optional path to config file
    """
    import uvicorn

    from portfolio_twin.server.app import create_app

    path = Path(config_path) if config_path else None
    try:
        config = load_config(path)
    except Exception as e:
        console.print(f"[red]Failed to load config: {e}[/red]")
        console.print("Run [bold]portfolio-twin init[/bold] to create a config file.")
        return

    configure_logging(config.logging.level)
    app = create_app(config)

    console.print(
        f"[green]Starting portfolio-twin on {config.server.host}:{config.server.port}[/green]"
    )
    console.print(f"Model: {config.model.name}")
    console.print("\nPress Ctrl+C to stop")

    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level=config.logging.level.lower(),
    )


def status_command(config_path: str | None = None) -> None:
    """Check the server health endpoint.

    Args:
        config_path: Optional path to config file
    """
    try:
        config = load_config(Path(config_path) if config_path else None)
        host = config.server.host
        port = config.server.port
    except Exception:
        host = "127.0.0.1"
        port = 8000

    try:
        resp = httpx.get(f"http://{host}:{port}/health", timeout=3.0)
        resp.raise_for_status()
        data = resp.json()
    except httpx.HTTPError:
        console.print("[yellow]Server is not running.[/yellow]")
        console.print("Start with: [bold]portfolio-twin start[/bold]")
        return

    console.print("[green]Server is running[/green]")
    console.print(f"  URL:     http://{host}:{port}")
    console.print(f"  Model:   {data.get('model', 'unknown')}")
    console.print(f"  Version: {data.get('version', 'unknown')}")
