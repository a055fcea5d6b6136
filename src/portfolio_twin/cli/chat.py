"""Interactive chat REPL command."""

from __future__ import annotations

import asyncio
import uuid
from pathlib import Path

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.prompt import Prompt

from portfolio_twin.chat.orchestrator import ChatOrchestrator, create_orchestrator
from portfolio_twin.chat.schema import ProfileReply
from portfolio_twin.config.loader import load_config
from portfolio_twin.config.schema import AppConfig
from portfolio_twin.errors import ChatValidationError

console = Console()


def chat_command(config_path: str | None = None) -> None:
    """Start interactive chat session.

    Args:
        config_path: Optional path to config file
    """
    path = Path(config_path) if config_path else None
    try:
        config = load_config(path)
    except Exception as e:
        console.print(f"[red]Failed to load config: {e}[/red]")
        console.print("Run [bold]portfolio-twin init[/bold] to create a config file.")
        return

    console.print(
        Panel.fit(
            f"[bold blue]portfolio-twin chat[/bold blue]\n"
            f"Model: {config.model.name}\n"
            f"Type /quick to list quick questions, /quick N to ask one, /exit to quit",
            border_style="blue",
        )
    )

    asyncio.run(_async_chat(config))


async def _async_chat(config: AppConfig) -> None:
    """Async chat loop over a fresh in-memory session."""
    orchestrator = create_orchestrator(config)
    session_id = f"cli_{uuid.uuid4().hex}"
    name = config.persona.name

    while True:
        try:
            user_input = Prompt.ask("\n[bold cyan]You[/bold cyan]")
            if not user_input.strip():
                continue

            is_quick = False
            if user_input.startswith("/"):
                command, _, arg = user_input.partition(" ")
                if command in ("/exit", "/quit"):
                    break
                if command != "/quick":
                    console.print(f"[yellow]Unknown command: {command}[/yellow]")
                    continue
                question = _pick_quick_question(orchestrator, arg)
                if question is None:
                    continue
                user_input, is_quick = question, True
                console.print(f"[dim]{question}[/dim]")

            with console.status("[bold green]Thinking...[/bold green]", spinner="dots"):
                result = await orchestrator.handle_turn(session_id, user_input, is_quick)

            title = f"[bold green]{name}[/bold green]"
            if isinstance(result.reply, ProfileReply):
                console.print(Panel(Markdown(result.reply.text), title=title, border_style="green"))
            else:
                console.print(f"\n{title}")
                console.print(Markdown(result.reply.text))

        except ChatValidationError as e:
            for detail in e.details:
                console.print(f"[red]{detail['msg']}[/red]")
        except (KeyboardInterrupt, EOFError):
            break

    await orchestrator.dispatcher.aclose()
    console.print("\n[cyan]Goodbye![/cyan]")


def _pick_quick_question(orchestrator: ChatOrchestrator, arg: str) -> str | None:
    questions = orchestrator.resolver.questions
    if not arg.strip():
        for index, question in enumerate(questions, start=1):
            console.print(f"  {index}. {question}")
        return None
    try:
        index = int(arg)
    except ValueError:
        index = 0
    if 1 <= index <= len(questions):
        return questions[index - 1]
    console.print(f"[red]Pick a number between 1 and {len(questions)}[/red]")
    return None
