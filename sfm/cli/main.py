"""Main CLI entry point for Social Feed Monitor."""

import logging

import typer
from rich.logging import RichHandler

from sfm.cli.commands.feed import feed_command
from sfm.cli.commands.highlight import highlight_command
from sfm.cli.commands.serve import serve_command
from sfm.cli.utils.options import VERBOSE_OPTION

app = typer.Typer(
    name="sfm",
    help="Social Feed Monitor - Browse generated social media posts with keyword highlighting",
    add_completion=True,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback()
def callback(verbose: VERBOSE_OPTION = False) -> None:
    """
    Social Feed Monitor CLI
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


app.command("highlight", help="Highlight keyword matches in text")(highlight_command)
app.command("feed", help="Show a feed of generated posts matching keywords and platforms")(feed_command)
app.command("serve", help="Run the post generation HTTP proxy")(serve_command)


if __name__ == "__main__":
    app()
