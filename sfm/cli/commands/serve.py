"""Serve command implementation."""

from typing import Annotated

import typer
import uvicorn
from rich.console import Console
from rich.markup import escape

from sfm.config import load_config
from sfm.core.constants import GENERATE_POSTS_PATH, APIConstants
from sfm.exceptions import ConfigurationError

console = Console()


def serve_command(
    host: Annotated[
        str,
        typer.Option(
            "--host",
            help="Interface to bind",
        ),
    ] = "127.0.0.1",
    port: Annotated[
        int,
        typer.Option(
            "--port",
            help="Port to listen on",
            min=1,
            max=65535,
        ),
    ] = APIConstants.DEFAULT_PORT,
    reload: Annotated[
        bool,
        typer.Option(
            "--reload",
            help="Restart the server when code changes",
        ),
    ] = False,
) -> None:
    """Run the post generation proxy."""
    try:
        config = load_config()
    except ConfigurationError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    if not config.llm_api_key:
        console.print("[yellow]Warning: no LLM API key set (SFM_LLM_API_KEY or API_KEY).[/yellow]")
        console.print("[dim]Requests will fail with a server configuration error.[/dim]")

    console.print(f"[bold]Serving[/bold] POST http://{host}:{port}{GENERATE_POSTS_PATH}")
    uvicorn.run("sfm.api.server:create_app", factory=True, host=host, port=port, reload=reload)
