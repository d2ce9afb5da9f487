"""Provider factory functions for CLI.

Centralizes creation of storage, LLM and gateway instances from environment
variables. Hides configuration details from command implementations.
"""

import os
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from ..llm import create_llm_provider
from ..session import EchoGateway, ProviderGateway, ResponseGateway
from ..storage import KeyValueStore, create_kv_store

_console = Console()


def get_storage() -> KeyValueStore:
    """Create the settings storage backend from environment variables.

    Environment variables:
        AGICHAT_STORAGE: Backend type, 'file' or 'memory' (default: file)
        AGICHAT_STORAGE_PATH: JSON document path (default: ~/.agichat/storage.json)
    """
    backend = os.getenv("AGICHAT_STORAGE", "file").lower()
    config: dict[str, Any] = {}
    if backend == "file" and os.getenv("AGICHAT_STORAGE_PATH"):
        config["path"] = Path(os.environ["AGICHAT_STORAGE_PATH"])
    return create_kv_store(backend, **config)


def get_llm(console: Console | None = None) -> Any | None:
    """Create LLM provider from environment variables.

    Returns:
        LLM provider instance, or None if not configured

    Environment variables:
        LLM_PROVIDER: Provider type (gemini, openai; default: gemini)
        GEMINI_API_KEY: Gemini API key (for gemini provider)
        GEMINI_MODEL: Gemini model (default: gemini-2.5-flash)
        OPENAI_API_KEY: OpenAI API key (for openai provider)
        OPENAI_CHAT_MODEL: OpenAI model (default: gpt-4o-mini)
        OPENAI_BASE_URL: Endpoint of an OpenAI-compatible server (optional)
    """
    con = console or _console
    llm_provider = os.getenv("LLM_PROVIDER", "gemini").lower()

    if llm_provider == "gemini":
        api_key = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
        if not api_key:
            con.print("[yellow]Warning: GEMINI_API_KEY not set[/yellow]")
            return None
        model = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
        return create_llm_provider("gemini", api_key=api_key, model=model)

    elif llm_provider == "openai":
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            con.print("[yellow]Warning: OPENAI_API_KEY not set[/yellow]")
            return None
        model = os.getenv("OPENAI_CHAT_MODEL", "gpt-4o-mini")
        return create_llm_provider(
            "openai",
            api_key=api_key,
            model=model,
            base_url=os.getenv("OPENAI_BASE_URL"),
        )

    else:
        con.print(f"[red]Error: Unknown LLM provider: {llm_provider}[/red]")
        return None


def get_gateway(offline: bool = False, console: Console | None = None) -> ResponseGateway:
    """Create the response gateway.

    Args:
        offline: Use the echo gateway instead of a real provider
        console: Optional Rich console for output

    Raises:
        typer.Exit: If no provider is configured and offline is False
    """
    con = console or _console
    if offline:
        return EchoGateway(delay=1.0)

    llm = get_llm(con)
    if llm is None:
        con.print("[red]Error: LLM provider not configured[/red]")
        con.print("[dim]Set GEMINI_API_KEY (or LLM_PROVIDER=openai with OPENAI_API_KEY), or pass --offline[/dim]")
        raise typer.Exit(code=1)
    return ProviderGateway(llm)
