"""Shared CLI options and enums for commands."""

from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from sfm.models.post import Platform


class OutputFormat(StrEnum):
    """Output formats for the feed command."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"


KEYWORDS_OPTION = Annotated[
    list[str] | None,
    typer.Option(
        "--keyword",
        "-k",
        help="Keyword to search for and highlight (repeatable)",
    ),
]

PLATFORMS_OPTION = Annotated[
    list[Platform] | None,
    typer.Option(
        "--platform",
        "-p",
        help="Platform to include (repeatable, default: VK)",
        case_sensitive=False,
    ),
]

OUTPUT_PATH_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Output file path (prints to stdout if omitted)",
    ),
]

SEARCH_OPTION = Annotated[
    str | None,
    typer.Option(
        "--search",
        help="Fuzzy search filter over message, author and city",
    ),
]

SERVER_URL_OPTION = Annotated[
    str | None,
    typer.Option(
        "--server",
        help="Fetch posts through this proxy URL instead of calling the LLM directly",
    ),
]

NO_CACHE_OPTION = Annotated[
    bool,
    typer.Option(
        "--no-cache",
        help="Skip cached feeds and generate fresh posts",
    ),
]

LLM_PROVIDER_OPTION = Annotated[
    str | None,
    typer.Option(
        "--llm-provider",
        help="LLM provider (gemini, openai, anthropic, etc.)",
    ),
]

LLM_MODEL_OPTION = Annotated[
    str | None,
    typer.Option(
        "--llm-model",
        help="LLM model name (gemini-2.5-flash, gpt-4o-mini, etc.)",
    ),
]

LLM_API_KEY_OPTION = Annotated[
    str | None,
    typer.Option(
        "--llm-api-key",
        help="LLM API key (or set via environment)",
        hide_input=True,
    ),
]

LLM_TEMPERATURE_OPTION = Annotated[
    float | None,
    typer.Option(
        "--llm-temperature",
        help="LLM temperature (0.0-2.0)",
        min=0.0,
        max=2.0,
    ),
]

VERBOSE_OPTION = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
]
