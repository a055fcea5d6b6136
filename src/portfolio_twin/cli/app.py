"""Main CLI application using Typer."""

import typer
from rich.console import Console

from portfolio_twin import __version__

app = typer.Typer(
    name="portfolio-twin",
    help="portfolio-twin - chat backend that answers as the portfolio owner",
    no_args_is_help=True,
)

console = Console()


@app.command()
def version():
    """Show portfolio-twin version."""
    console.print(f"portfolio-twin version {__version__}")


@app.command()
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Where to write the config (default: ~/.portfolio-twin/portfolio-twin.yaml)",
    ),
):
    """Write a default configuration file."""
    from portfolio_twin.cli.init_cmd import init_command

    init_command(force=force, config_path=config_path)


@app.command()
def chat(
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: ~/.portfolio-twin/portfolio-twin.yaml)",
    ),
):
    """Chat with the portfolio assistant in the terminal."""
    from portfolio_twin.cli.chat import chat_command

    chat_command(config_path=config_path)


@app.command()
def start(
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
):
    """Start the chat API server."""
    from portfolio_twin.cli.server_cmd import start_command

    start_command(config_path=config_path)


@app.command()
def status(
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
):
    """Check chat API server status."""
    from portfolio_twin.cli.server_cmd import status_command

    status_command(config_path=config_path)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
