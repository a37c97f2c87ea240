"""Serializing command results to stdout or a file."""

import csv
import io
import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from rich.console import Console

from sfm.core.constants import FormattingConstants
from sfm.exceptions import ExportError

console = Console()


def write_or_print(content: str, output_path: Path | None) -> None:
    """Save content to output_path, or print it as-is when no path is given."""
    if output_path is None:
        print(content)
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    console.print(f"[bold green]✓ Saved to:[/bold green] {output_path}")


def dump_json(data: Any) -> str:
    return json.dumps(data, indent=FormattingConstants.JSON_INDENT, default=str, ensure_ascii=False)


def dump_csv(rows: Sequence[Mapping[str, Any]]) -> str:
    """Render rows as CSV with a header taken from the first row.

    Nested values are written as JSON, None as an empty cell.

    Raises:
        ExportError: If a row has a column the first row does not
    """
    if not rows:
        return ""

    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(rows[0]))
    writer.writeheader()
    for row in rows:
        cells = {
            key: json.dumps(value, ensure_ascii=False) if isinstance(value, dict | list) else value
            for key, value in row.items()
        }
        try:
            writer.writerow({key: "" if value is None else value for key, value in cells.items()})
        except ValueError as e:
            raise ExportError("csv", f"Cannot write CSV row: {e}") from e
    return buffer.getvalue()
