"""TUI mode for browsing the post feed with live keyword highlighting."""

import logging
from collections.abc import Callable
from typing import Any, ClassVar

import pyperclip
from rich.markup import escape
from rich.text import Text
from textual import on, work
from textual.app import App, ComposeResult
from textual.binding import Binding, BindingType
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import DataTable, Footer, Header, Input, Static, TextArea
from textual.worker import Worker, get_current_worker

from sfm.cli.utils.data import FeedFetcher, posts_from_result
from sfm.cli.utils.feed_shared import COLUMN_CONFIG, PostTableRow
from sfm.core.filters import FeedFilters
from sfm.core.highlighting import highlight_text
from sfm.exceptions import SFMError
from sfm.llm.client import LLMError
from sfm.models.post import Post

# Modal dialog constants
POST_DIALOG_WIDTH_PERCENT = 80
POST_DIALOG_MAX_WIDTH = 100
POST_DIALOG_HEIGHT_PERCENT = 80

# Keyword input prefix that removes a keyword instead of adding it
REMOVE_PREFIX = "-"

logger = logging.getLogger(__name__)


class PostScreen(ModalScreen[None]):
    """Modal screen showing a whole post."""

    CSS = f"""
    PostScreen {{
        align: center middle;
    }}

    PostScreen > Vertical {{
        width: {POST_DIALOG_WIDTH_PERCENT}%;
        max-width: {POST_DIALOG_MAX_WIDTH};
        height: {POST_DIALOG_HEIGHT_PERCENT}%;
        background: $surface;
        border: solid $primary;
        padding: 1;
    }}

    #post-message {{
        height: 1fr;
        margin: 1 0;
    }}
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("escape", "dismiss", "Close", show=False),
    ]

    def __init__(self, post: Post, keywords: list[str]):
        super().__init__()
        self.post = post
        self.keywords = keywords

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static(
                f"[bold]{escape(self.post.user.name)}[/bold] · {escape(self.post.platform.value)} · "
                f"{escape(self.post.post_date)} · {escape(self.post.city)}"
            )
            yield Static(highlight_text(self.post.message, self.keywords))
            text_area = TextArea(f"{self.post.message}\n\n{self.post.post_url}", read_only=True)
            text_area.id = "post-message"
            yield text_area
            yield Static("[dim]Press ESC to return to the feed[/dim]")


class FeedTUI(App[None]):
    """TUI app for displaying the post feed."""

    CSS = """
    DataTable {
        height: 1fr;
    }

    #keywords {
        padding: 0 1;
    }

    .status-bar {
        dock: bottom;
        height: 1;
        background: $surface;
        color: $text;
        padding: 0 1;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("ctrl+q", "quit", "Quit", show=True),
        Binding("ctrl+r", "refresh_feed", "Refresh", show=True),
        Binding("ctrl+y", "copy_message", "Copy Message", show=True),
        Binding("ctrl+k", "focus_keywords", "Keywords", show=True),
    ]

    def __init__(self, posts: list[Post], filters: FeedFilters, fetcher: FeedFetcher | None = None):
        super().__init__()
        self.posts = posts
        self.filters = filters
        self.fetcher = fetcher
        self.title = "Social Feed Monitor"

    def compose(self) -> ComposeResult:
        """Create child widgets for the app."""
        yield Header()
        yield Static(id="keywords")
        yield Input(placeholder="Добавить ключевое слово и нажать Enter (-слово удаляет)", id="keyword-input")
        yield DataTable(cursor_type="row", zebra_stripes=True)
        yield Static(classes="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Set up the data table when the app starts."""
        table = self.query_one(DataTable)
        for col_config in COLUMN_CONFIG:
            table.add_column(col_config.label, width=col_config.width, key=col_config.key)
        self._render_posts()
        table.focus()

    def _render_posts(self) -> None:
        """Fill the table, highlighting the current keywords."""
        table = self.query_one(DataTable)
        table.clear()
        for post in self.posts:
            row = PostTableRow.from_post(post).to_tuple()
            table.add_row(
                *(
                    highlight_text(value, self.filters.keywords) if col_config.highlight else Text(value)
                    for col_config, value in zip(COLUMN_CONFIG, row, strict=True)
                ),
                key=post.id,
            )
        self.query_one("#keywords", Static).update(
            f"[bold]Ключевые слова:[/bold] {escape(', '.join(self.filters.keywords)) or '—'}   "
            f"[bold]Источники:[/bold] {', '.join(p.value for p in self.filters.platforms) or '—'}"
        )
        if self.posts:
            self._set_status(f"Total posts: {len(self.posts)}")
        else:
            self._set_status("Сообщений не найдено. Попробуйте изменить ключевые слова.")

    def _set_status(self, message: str) -> None:
        self.query_one(".status-bar", Static).update(message)

    def _current_post(self) -> Post | None:
        table = self.query_one(DataTable)
        row = table.cursor_coordinate.row
        if 0 <= row < len(self.posts):
            return self.posts[row]
        return None

    @on(Input.Submitted, "#keyword-input")
    def on_keyword_submitted(self, event: Input.Submitted) -> None:
        """Add or remove a keyword, then re-highlight and refetch."""
        value = event.value.strip()
        event.input.value = ""
        if value.startswith(REMOVE_PREFIX):
            changed = self.filters.remove_keyword(value[len(REMOVE_PREFIX) :].strip().lower())
        else:
            changed = self.filters.add_keyword(value)
        if not changed:
            return
        self._render_posts()
        self.action_refresh_feed()

    @on(DataTable.RowSelected)
    def on_row_selected(self, _event: DataTable.RowSelected) -> None:
        """Show the selected post."""
        post = self._current_post()
        if post:
            self.push_screen(PostScreen(post, self.filters.keywords))

    def action_focus_keywords(self) -> None:
        """Move focus to the keyword input."""
        self.query_one("#keyword-input", Input).focus()

    def action_copy_message(self) -> None:
        """Copy the selected post message to the clipboard."""
        post = self._current_post()
        if not post:
            return
        try:
            pyperclip.copy(post.message)
            self._set_status("[green]Copied to clipboard![/green]")
        except pyperclip.PyperclipException:
            self._set_status("[red]Copy failed - clipboard not available[/red]")

    def action_refresh_feed(self) -> None:
        """Fetch the feed again for the current filters."""
        if not self.fetcher:
            return
        if not self.filters.is_searchable:
            self.workers.cancel_node(self)
            self._show_posts([])
            return
        self._set_status("Loading posts...")
        self._fetch_posts(self.filters.model_copy(deep=True))

    @work(thread=True, exclusive=True)
    def _fetch_posts(self, filters: FeedFilters) -> None:
        if not self.fetcher:
            return
        worker = get_current_worker()
        try:
            posts = posts_from_result(self.fetcher(filters))
        except (SFMError, LLMError) as e:
            logger.error(f"Error refreshing feed: {e}")
            self.call_from_thread(
                self._apply_fetch, worker, self._set_status, f"[red]Произошла ошибка: {escape(str(e))}[/red]"
            )
            return
        if worker.is_cancelled:
            logger.debug(f"Dropping results for outdated keywords {filters.keywords}")
            return
        self.call_from_thread(self._apply_fetch, worker, self._show_posts, posts)

    def _apply_fetch(self, worker: Worker[None], update: Callable[..., None], *args: Any) -> None:
        # a newer refresh may have cancelled the worker after it finished fetching
        if not worker.is_cancelled:
            update(*args)

    def _show_posts(self, posts: list[Post]) -> None:
        self.posts = posts
        self._render_posts()


def launch_feed_tui(posts: list[Post], filters: FeedFilters, fetcher: FeedFetcher | None = None) -> None:
    """Launch the TUI app for displaying the feed."""
    app = FeedTUI(posts, filters, fetcher)
    app.run()
