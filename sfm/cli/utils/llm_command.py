"""LLM client setup for commands that generate posts."""

import typer
from rich.console import Console
from rich.markup import escape

from sfm.config import Config
from sfm.llm.client import LLMClient

console = Console()


def initialize_llm_client(
    llm_provider: str | None = None,
    llm_model: str | None = None,
    llm_api_key: str | None = None,
    llm_temperature: float | None = None,
    config: Config | None = None,
) -> LLMClient:
    """Build the LLM client from command line overrides and config.

    Raises:
        typer.Exit: If the client cannot be created
    """
    try:
        llm_client = LLMClient(
            provider=llm_provider,
            model=llm_model,
            api_key=llm_api_key,
            temperature=llm_temperature,
            config=config,
        )
    except Exception as e:
        console.print(f"[red]Error initializing LLM client: {escape(str(e))}[/red]")
        console.print("[dim]Check SFM_LLM_PROVIDER, SFM_LLM_MODEL and SFM_LLM_API_KEY.[/dim]")
        raise typer.Exit(1) from e

    if not llm_client.has_api_key:
        console.print(f"[dim]No API key set; {llm_client.provider} will use its own environment variable.[/dim]")
    console.print(f"[dim]Using LLM: {llm_client}[/dim]")
    return llm_client
