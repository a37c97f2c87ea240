"""Highlight command implementation."""

from enum import StrEnum
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from sfm.cli.utils.options import KEYWORDS_OPTION, OUTPUT_PATH_OPTION
from sfm.cli.utils.output import dump_json, write_or_print
from sfm.core.highlighting import Segment, highlight, highlight_text, segments_to_markup

console = Console()


class HighlightFormat(StrEnum):
    """Output formats for the highlight command."""

    TEXT = "text"
    JSON = "json"
    MARKUP = "markup"


def transform_segments_for_json(segments: list[Segment]) -> list[dict[str, Any]]:
    """Transform segments for JSON output."""
    return [segment.model_dump(mode="json") for segment in segments]


def highlight_command(
    text: Annotated[
        str | None,
        typer.Argument(help="Text to highlight (reads --file or stdin if omitted)"),
    ] = None,
    keywords: KEYWORDS_OPTION = None,
    file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            help="Read the text from a file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    output_format: Annotated[
        HighlightFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format",
            case_sensitive=False,
        ),
    ] = HighlightFormat.TEXT,
    output: OUTPUT_PATH_OPTION = None,
) -> None:
    """Highlight keyword matches in a piece of text.

    Matching is literal and case-insensitive; overlapping matches are merged.
    """
    if output and output_format == HighlightFormat.TEXT:
        # styled text only exists on the terminal
        raise typer.BadParameter("use --format json or --format markup to save to a file", param_hint="--output")

    if text is None:
        if file:
            text = file.read_text(encoding="utf-8")
        else:
            text = typer.get_text_stream("stdin").read()

    segments = highlight(text, keywords or [])

    if output_format == HighlightFormat.JSON:
        write_or_print(dump_json(transform_segments_for_json(segments)), output)
    elif output_format == HighlightFormat.MARKUP:
        write_or_print(segments_to_markup(segments), output)
    else:
        console.print(highlight_text(text, keywords or []))
