"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..errors import SettingsError
from ..logging_utils import configure_logging
from ..session import (
    FALLBACK_MESSAGE,
    SettingsStore,
    ViewState,
    create_controller,
    panel_for,
)
from .providers import get_gateway, get_storage

load_dotenv()

app = typer.Typer(
    name="agichat",
    help="Conversational client for generative-intelligence services",
    no_args_is_help=True,
    add_completion=True,
)
settings_app = typer.Typer(help="Show or change persisted settings", no_args_is_help=True)
app.add_typer(settings_app, name="settings")

console = Console()

EXIT_WORDS = ("exit", "quit", "q")

# Values accepted as "unset" for optional settings fields
_NONE_VALUES = ("", "none", "null", "default")


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        "-l",
        help="Log level: debug, info, warning or error"
    ),
    offline: bool = typer.Option(
        False,
        "--offline",
        help="Answer with a local echo gateway instead of a real provider"
    ),
):
    """Global options shared by every command."""
    ctx.obj = {"log_level": log_level, "offline": offline}


def _console_logging(ctx: typer.Context) -> None:
    configure_logging(ctx.obj["log_level"])


@app.command()
def ask(
    ctx: typer.Context,
    prompt: str = typer.Argument(..., help="Text to send"),
):
    """Send one prompt and print the reply."""
    _console_logging(ctx)

    async def _ask() -> str | None:
        controller = create_controller(get_storage(), get_gateway(ctx.obj["offline"], console))
        try:
            with console.status("[cyan]Thinking[/cyan]"):
                await controller.send_message(prompt)
            return controller.conversation.last_reply()
        finally:
            await controller.aclose()

    reply = asyncio.run(_ask())
    if reply is None or reply == FALLBACK_MESSAGE:
        console.print(f"[red]{FALLBACK_MESSAGE}[/red]")
        raise typer.Exit(code=1)
    console.print(reply, markup=False)


@app.command()
def chat(ctx: typer.Context):
    """Interactive console chat. '/new' starts a new chat."""
    _console_logging(ctx)

    async def _chat():
        controller = create_controller(get_storage(), get_gateway(ctx.obj["offline"], console))
        status_holder: dict = {}

        def _on_tick(label: str) -> None:
            status = status_holder.get("status")
            if status is not None:
                status.update(f"[cyan]{label}[/cyan]")

        controller.indicator.add_listener(_on_tick)
        controller.navigate(ViewState.CONVERSATION)
        panel = panel_for(ViewState.CONVERSATION)

        console.print(Panel(panel.tagline, title=panel.title, border_style="blue"))
        console.print("[dim]Type '/new' for a new chat; 'exit', 'quit' or 'q' to leave[/dim]\n")

        try:
            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                text = user_input.strip()
                if not text:
                    continue
                if text.lower() in EXIT_WORDS:
                    console.print("[dim]Goodbye![/dim]")
                    break
                if text == "/new":
                    controller.new_chat()
                    console.print("[dim]New chat started.[/dim]\n")
                    continue

                with console.status("[cyan]Thinking[/cyan]") as status:
                    status_holder["status"] = status
                    await controller.send_message(text)
                status_holder.pop("status", None)

                reply = controller.conversation.last_reply() or ""
                style = "red" if reply == FALLBACK_MESSAGE else "green"
                console.print(f"[bold {style}]AGI:[/bold {style}] {escape(reply)}\n")
        finally:
            await controller.aclose()

    asyncio.run(_chat())


@app.command(name="tui")
def tui_command(ctx: typer.Context):
    """Launch the interactive TUI."""
    from ..ui import run_textual_tui

    async def _tui():
        gateway = get_gateway(ctx.obj["offline"], console)
        controller = create_controller(get_storage(), gateway)
        try:
            await run_textual_tui(controller, log_level=ctx.obj["log_level"])
        finally:
            await controller.aclose()

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass
    console.print("[dim]Goodbye![/dim]")


@settings_app.command("show")
def settings_show(ctx: typer.Context):
    """Print the current settings."""
    _console_logging(ctx)
    store = SettingsStore(get_storage())

    table = Table(title="Settings", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for name, value in store.current.model_dump(mode="json").items():
        shown = "[dim](default)[/dim]" if value in (None, "") else escape(str(value))
        table.add_row(name, shown)
    console.print(table)


@settings_app.command("set")
def settings_set(
    ctx: typer.Context,
    field: str = typer.Argument(..., help="Settings field name"),
    value: str = typer.Argument(..., help="New value ('none' clears optional fields)"),
):
    """Change one settings field."""
    _console_logging(ctx)
    store = SettingsStore(get_storage())

    known = set(type(store.current).model_fields)
    if field not in known:
        console.print(f"[red]Error: unknown field '{field}'. Known: {', '.join(sorted(known))}[/red]")
        raise typer.Exit(code=1)

    new_value: str | None = value
    if field == "max_output_tokens" and value.strip().lower() in _NONE_VALUES:
        new_value = None

    try:
        store.update(**{field: new_value})
    except ValidationError as e:
        console.print(f"[red]Error: invalid value for {field}: {e.errors()[0]['msg']}[/red]")
        raise typer.Exit(code=1)
    except SettingsError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]{field} updated.[/green]")


@settings_app.command("reset")
def settings_reset(ctx: typer.Context):
    """Restore default settings."""
    _console_logging(ctx)
    store = SettingsStore(get_storage())
    try:
        store.reset()
    except SettingsError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)
    console.print("[green]Settings reset to defaults.[/green]")


def main():
    app()


if __name__ == "__main__":
    main()
