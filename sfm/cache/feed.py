"""Cache of generated feeds, keyed by search filters and model."""

import hashlib
import logging
import time
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from sfm.cache.base import DiskCacheStore
from sfm.core.constants import CacheLimits
from sfm.models.cache import CachedFeed
from sfm.models.post import Post

logger = logging.getLogger(__name__)


class FeedCache(DiskCacheStore):
    """Keeps generated feeds for a while so repeated searches skip the LLM."""

    def __init__(self, cache_root: Path | None = None, ttl_hours: float = CacheLimits.FEED_TTL_HOURS) -> None:
        super().__init__("feeds", cache_root=cache_root)
        self.ttl_hours = ttl_hours

    @staticmethod
    def _generate_cache_key(
        keywords: Sequence[str],
        platforms: Sequence[str],
        llm_model: str,
        llm_provider: str,
    ) -> str:
        """Key for a search. Order never matters; keywords compare case-insensitively."""
        keywords_key = "|".join(sorted({k.strip().lower() for k in keywords if k.strip()}))
        platforms_key = "|".join(sorted({str(p) for p in platforms}))
        digest = hashlib.sha256(f"{keywords_key}#{platforms_key}".encode()).hexdigest()[:16]
        return f"{llm_provider}_{llm_model}_{digest}"

    def get_feed(
        self,
        keywords: Sequence[str],
        platforms: Sequence[str],
        llm_model: str,
        llm_provider: str,
    ) -> list[Post] | None:
        """Cached posts for the search, or None if there are none or they expired."""
        cache_key = self._generate_cache_key(keywords, platforms, llm_model, llm_provider)
        cached_data = self.get(cache_key)
        if not isinstance(cached_data, dict):
            return None

        try:
            cached = CachedFeed.model_validate(cached_data)
            return [Post.model_validate(post) for post in cached.posts]
        except ValidationError as e:
            logger.debug(f"Ignoring unreadable cached feed {cache_key}: {e}")
            return None

    def save_feed(
        self,
        posts: Sequence[Post],
        keywords: Sequence[str],
        platforms: Sequence[str],
        llm_model: str,
        llm_provider: str,
    ) -> None:
        cache_key = self._generate_cache_key(keywords, platforms, llm_model, llm_provider)
        cached = CachedFeed(
            keywords=list(keywords),
            platforms=[str(p) for p in platforms],
            llm_provider=llm_provider,
            llm_model=llm_model,
            cached_at=time.time(),
            posts=[post.to_wire() for post in posts],
        )
        self.set(cache_key, cached.model_dump(), ttl_hours=self.ttl_hours)
        logger.debug(f"Cached {len(posts)} posts under {cache_key} for {self.ttl_hours}h")

    def get_cache_stats(self) -> dict[str, Any]:
        return {
            "total_entries": len(self),
            "ttl_hours": self.ttl_hours,
            "cache_path": str(self.cache_path),
        }
