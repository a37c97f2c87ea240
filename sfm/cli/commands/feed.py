"""Feed command implementation."""

import logging
import time
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from sfm.cli.commands.feed_tui import launch_feed_tui
from sfm.cli.utils.data import make_feed_fetcher, posts_from_result
from sfm.cli.utils.feed_shared import COLUMN_CONFIG, PostTableRow, transform_post_for_csv
from sfm.cli.utils.llm_command import initialize_llm_client
from sfm.cli.utils.options import (
    KEYWORDS_OPTION,
    LLM_API_KEY_OPTION,
    LLM_MODEL_OPTION,
    LLM_PROVIDER_OPTION,
    LLM_TEMPERATURE_OPTION,
    NO_CACHE_OPTION,
    OUTPUT_PATH_OPTION,
    PLATFORMS_OPTION,
    SEARCH_OPTION,
    SERVER_URL_OPTION,
    OutputFormat,
)
from sfm.cli.utils.output import dump_csv, dump_json, write_or_print
from sfm.config import load_config
from sfm.core.filters import FeedFilters
from sfm.core.highlighting import highlight_text
from sfm.core.search import PostSearcher
from sfm.exceptions import ConfigurationError, SFMError
from sfm.llm.client import LLMError
from sfm.models.post import Post
from sfm.models.stats import FeedCommandStats

console = Console()
logger = logging.getLogger(__name__)


def handle_table_output(posts: list[Post], keywords: list[str]) -> None:
    """Handle table format output."""
    table = Table(title=f"Ключевые слова: {escape(', '.join(keywords))}", show_lines=True, expand=True)
    for col_config in COLUMN_CONFIG:
        table.add_column(col_config.label, **col_config.get_table_kwargs())

    for post in posts:
        row = PostTableRow.from_post(post).to_tuple()
        table.add_row(
            *(
                highlight_text(value, keywords) if col_config.highlight else Text(value)
                for col_config, value in zip(COLUMN_CONFIG, row, strict=True)
            )
        )

    console.print(table)
    console.print(f"\n[bold]Total posts:[/bold] {len(posts)}")


def feed_command(
    keywords: KEYWORDS_OPTION = None,
    platforms: PLATFORMS_OPTION = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    output: OUTPUT_PATH_OPTION = None,
    no_tui: Annotated[
        bool,
        typer.Option(
            "--no-tui",
            help="Disable TUI and print a simple table",
        ),
    ] = False,
    search: SEARCH_OPTION = None,
    since: Annotated[
        str | None,
        typer.Option(
            "--since",
            help="Only show posts newer than this (e.g. '1 day ago', 'yesterday')",
        ),
    ] = None,
    hide_unknown_locations: Annotated[
        bool,
        typer.Option(
            "--hide-unknown-locations",
            help="Hide posts whose city is unknown",
        ),
    ] = False,
    server: SERVER_URL_OPTION = None,
    no_cache: NO_CACHE_OPTION = False,
    llm_provider: LLM_PROVIDER_OPTION = None,
    llm_model: LLM_MODEL_OPTION = None,
    llm_api_key: LLM_API_KEY_OPTION = None,
    llm_temperature: LLM_TEMPERATURE_OPTION = None,
) -> None:
    """Show a feed of generated posts matching keywords and platforms.

    Keyword matches in messages are highlighted. Without --server the posts are
    generated by calling the language model directly.
    """
    stats = FeedCommandStats(start_time=time.time())
    try:
        config = load_config()
    except ConfigurationError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    filter_values: dict[str, object] = {
        "since": since,
        "include_unknown_locations": not hide_unknown_locations,
    }
    if keywords is not None:
        filter_values["keywords"] = keywords
    if platforms is not None:
        filter_values["platforms"] = platforms
    filters = FeedFilters.model_validate(filter_values)

    try:
        filters.since_datetime()
    except SFMError as e:
        console.print(f"[red]Invalid date format for --since: {since}[/red]")
        raise typer.Exit(1) from e

    if not filters.is_searchable:
        console.print("[yellow]Сообщений не найдено.[/yellow]")
        console.print("[dim]Add at least one keyword and one platform.[/dim]")
        return

    server = server or config.server_url
    llm_client = None
    if not server:
        llm_client = initialize_llm_client(llm_provider, llm_model, llm_api_key, llm_temperature, config=config)
    fetch = make_feed_fetcher(config, server_url=server, llm_client=llm_client, use_cache=not no_cache)

    try:
        with console.status("[bold blue]Generating posts...[/bold blue]", spinner="dots"):
            result = fetch(filters)
    except (SFMError, LLMError) as e:
        logger.debug(f"Feed fetch failed: {e!r}")
        console.print("[red]Произошла ошибка[/red]")
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    posts = posts_from_result(result)
    stats.from_cache = result.used_cache
    stats.posts_found = len(posts)

    if search:
        posts = PostSearcher().filter(posts, search)
        stats.filtered_count = len(posts)
        stats.search_pattern = search

    elapsed = time.time() - stats.start_time
    source = "Loaded from cache" if stats.from_cache else "Completed"
    summary = f"{stats.posts_found} posts"
    if stats.search_pattern is not None:
        summary += f", {stats.filtered_count} matching '{escape(stats.search_pattern)}'"
    console.print(f"[dim]{source} in {elapsed:.1f}s ({summary})[/dim]")

    if not posts:
        console.print("[yellow]Сообщений не найдено.[/yellow]")
        console.print("[dim]Попробуйте изменить ключевые слова или расширить фильтры.[/dim]")
        return

    if output_format == OutputFormat.TABLE and not no_tui:
        launch_feed_tui(posts, filters, fetch)
    elif output_format == OutputFormat.TABLE:
        handle_table_output(posts, filters.keywords)
    elif output_format == OutputFormat.JSON:
        write_or_print(dump_json([post.to_wire() for post in posts]), output)
    elif output_format == OutputFormat.CSV:
        write_or_print(dump_csv([transform_post_for_csv(post) for post in posts]), output)
