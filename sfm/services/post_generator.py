"""Post generation service using Instructor for structured outputs."""

import logging
import uuid
from collections.abc import Sequence

from sfm.cache.feed import FeedCache
from sfm.core.constants import GenerationConstants
from sfm.exceptions import PostGenerationError
from sfm.llm.client import LLMClient, LLMError
from sfm.llm.prompts import create_post_generation_messages
from sfm.models.post import GeneratedPostBatch, Platform, Post

logger = logging.getLogger(__name__)


class PostGenerationService:
    """Service for generating synthetic social media posts for a keyword search."""

    def __init__(
        self,
        llm_client: LLMClient,
        cache: FeedCache | None = None,
        min_posts: int = GenerationConstants.MIN_POSTS,
        max_posts: int = GenerationConstants.MAX_POSTS,
    ) -> None:
        """Initialize post generation service.

        Args:
            llm_client: LLM client used to generate posts
            cache: Optional feed cache; generated feeds are reused while fresh
            min_posts: Minimum number of posts to ask for
            max_posts: Maximum number of posts to ask for
        """
        self.llm_client = llm_client
        self.cache = cache
        self.min_posts = min_posts
        self.max_posts = max_posts
        self.last_from_cache = False

    def generate(self, keywords: Sequence[str], platforms: Sequence[Platform] | None = None) -> list[Post]:
        """Generate posts matching the keywords on the selected platforms.

        Args:
            keywords: Search keywords
            platforms: Allowed platforms (all platforms if omitted)

        Returns:
            Generated posts, each with a fresh unique id

        Raises:
            PostGenerationError: If the language model call fails
        """
        self.last_from_cache = False
        keywords = [k.strip() for k in keywords if k.strip()]
        selected = list(platforms) if platforms is not None else list(Platform)

        if not keywords or not selected:
            return []

        if self.cache is not None:
            cached = self.cache.get_feed(keywords, selected, self.llm_client.model, self.llm_client.provider)
            if cached is not None:
                logger.debug(f"Using cached feed with {len(cached)} posts")
                self.last_from_cache = True
                return cached

        messages = create_post_generation_messages(keywords, selected, self.min_posts, self.max_posts)

        logger.debug(f"Generating posts for keywords={keywords}, platforms={selected}")

        try:
            response = self.llm_client.complete(messages=messages, response_model=GeneratedPostBatch)
        except LLMError as e:
            logger.error(f"Error generating posts: {e}")
            raise PostGenerationError(f"Post generation failed: {e}", keywords) from e

        posts = []
        for generated in response.posts:
            if generated.platform not in selected:
                logger.warning(f"Dropping post from unselected platform: {generated.platform}")
                continue
            posts.append(Post.from_generated(generated, str(uuid.uuid4())))

        logger.debug(f"Generated {len(posts)} posts")

        if self.cache is not None:
            self.cache.save_feed(posts, keywords, selected, self.llm_client.model, self.llm_client.provider)

        return posts
