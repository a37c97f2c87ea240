"""Shared components for the feed table and TUI."""

from typing import Any

from pydantic import BaseModel, Field

from sfm.models.post import Post


class ColumnDefinition(BaseModel):
    """Configuration for a table column."""

    key: str = Field(description="Unique key for the column")
    label: str = Field(description="Display label for the column header")
    width: int | None = Field(default=None, description="Column width (None for dynamic)")
    highlight: bool = Field(default=False, description="Whether keyword matches are highlighted in this column")
    # Rich table styling options
    style: str | None = Field(default=None, description="Rich text style for the column")
    no_wrap: bool = Field(default=False, description="Prevent text wrapping")
    overflow: str | None = Field(default=None, description="Text overflow handling: fold, crop, ellipsis")
    min_width: int | None = Field(default=None, description="Minimum column width")

    def get_table_kwargs(self) -> dict[str, Any]:
        """Get kwargs for Rich table.add_column(), excluding None values and defaults."""
        kwargs: dict[str, Any] = {"no_wrap": self.no_wrap}
        if self.style:
            kwargs["style"] = self.style
        if self.width:
            kwargs["width"] = self.width
        if self.overflow:
            kwargs["overflow"] = self.overflow
        if self.min_width:
            kwargs["min_width"] = self.min_width
        return kwargs


# Centralized column configuration used by both table and TUI modes
COLUMN_CONFIG = [
    ColumnDefinition(key="date", label="Дата", width=10, style="bold", no_wrap=True),
    ColumnDefinition(key="time", label="Время", width=6, style="dim", no_wrap=True),
    ColumnDefinition(key="user", label="Пользователь", width=22, style="cyan", overflow="fold"),
    ColumnDefinition(key="platform", label="Источник", width=10, style="magenta", no_wrap=True),
    ColumnDefinition(key="message", label="Сообщение", width=60, overflow="fold", min_width=40, highlight=True),
    ColumnDefinition(key="city", label="Город", width=14, style="green", overflow="fold"),
]


class PostTableRow(BaseModel):
    """Represents a row of post data for table display."""

    post_id: str
    date: str
    time: str
    user: str
    platform: str
    message: str
    city: str

    def to_tuple(self) -> tuple[str, ...]:
        """Convert to tuple in COLUMN_CONFIG order."""
        return (self.date, self.time, self.user, self.platform, self.message, self.city)

    @classmethod
    def from_post(cls, post: Post) -> "PostTableRow":
        """Build a table row from a post."""
        return cls(
            post_id=post.id,
            date=post.date_label,
            time=post.time_label,
            user=post.user.name,
            platform=post.platform.value,
            message=post.message,
            city=post.city,
        )


def transform_post_for_csv(post: Post) -> dict[str, Any]:
    """Flatten a post for CSV output."""
    return {
        "id": post.id,
        "platform": post.platform.value,
        "category": post.category,
        "postDate": post.post_date,
        "userName": post.user.name,
        "avatarUrl": post.user.avatar_url,
        "message": post.message,
        "city": post.city,
        "postUrl": post.post_url,
    }
