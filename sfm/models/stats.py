"""Statistics and status tracking models."""

from pydantic import BaseModel


class FeedCommandStats(BaseModel):
    """Statistics for feed command execution."""

    start_time: float
    posts_found: int = 0
    from_cache: bool = False
    filtered_count: int | None = None
    search_pattern: str | None = None
