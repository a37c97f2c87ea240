"""Shared data access utilities for CLI commands."""

import logging
from collections.abc import Callable

from sfm.api.client import FeedAPIClient
from sfm.cache.feed import FeedCache
from sfm.config import Config
from sfm.core.filters import FeedFilters
from sfm.llm.client import LLMClient
from sfm.models.cache import LoadedFeedResult
from sfm.models.post import Post
from sfm.services.post_generator import PostGenerationService

logger = logging.getLogger(__name__)

FeedFetcher = Callable[[FeedFilters], LoadedFeedResult]


def make_feed_fetcher(
    config: Config,
    server_url: str | None = None,
    llm_client: LLMClient | None = None,
    use_cache: bool = True,
) -> FeedFetcher:
    """Build a function that loads the feed for the current filters.

    Posts come from the proxy when a server URL is given, otherwise from the
    language model directly.

    Args:
        config: Application config
        server_url: Optional proxy base URL
        llm_client: LLM client for direct generation
        use_cache: Reuse cached feeds for direct generation
    """
    if server_url:

        def fetch_from_server(filters: FeedFilters) -> LoadedFeedResult:
            if not filters.is_searchable:
                return LoadedFeedResult()
            logger.debug(f"Fetching feed through {server_url}")
            with FeedAPIClient(server_url) as client:
                posts = client.fetch_posts(filters.keywords, filters.platforms)
            return LoadedFeedResult(posts=[post.to_wire() for post in filters.apply(posts)])

        return fetch_from_server

    cache = FeedCache(config.cache_dir, ttl_hours=config.cache_ttl_hours) if use_cache else None
    service = PostGenerationService(
        llm_client or LLMClient(config=config),
        cache=cache,
        min_posts=config.min_posts,
        max_posts=config.max_posts,
    )

    def fetch_from_llm(filters: FeedFilters) -> LoadedFeedResult:
        if not filters.is_searchable:
            return LoadedFeedResult()
        posts = service.generate(filters.keywords, filters.platforms)
        return LoadedFeedResult(
            posts=[post.to_wire() for post in filters.apply(posts)],
            used_cache=service.last_from_cache,
        )

    return fetch_from_llm


def posts_from_result(result: LoadedFeedResult) -> list[Post]:
    """Validate the posts of a loaded feed."""
    return [Post.model_validate(post) for post in result.posts]
