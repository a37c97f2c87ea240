"""Cache-related data models."""

from typing import Any

from pydantic import BaseModel, Field


class CachedFeed(BaseModel):
    """Model for a cached generated feed."""

    keywords: list[str]
    platforms: list[str]
    llm_provider: str
    llm_model: str
    cached_at: float
    posts: list[dict[str, Any]] = Field(default_factory=list)  # Posts in wire format


class LoadedFeedResult(BaseModel):
    """Result from loading a feed."""

    posts: list[dict[str, Any]] = Field(default_factory=list)
    used_cache: bool = False
