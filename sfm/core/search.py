"""Fuzzy search over post feeds."""

import logging
from collections.abc import Sequence

from rapidfuzz import fuzz, process

from sfm.core.constants import DisplayConstants
from sfm.models.post import Post

logger = logging.getLogger(__name__)


class PostSearcher:
    """Fuzzy search over post text, author and city."""

    def __init__(self, threshold: int = DisplayConstants.SEARCH_THRESHOLD) -> None:
        self.threshold = threshold

    @staticmethod
    def _search_text(post: Post) -> str:
        return f"{post.message} {post.user.name} {post.city} {post.platform}".lower()

    def search(self, posts: Sequence[Post], query: str) -> list[tuple[Post, float]]:
        """Find posts that contain the query as a fuzzy substring.

        Args:
            posts: Posts to search
            query: Search query, matched case-insensitively with typo tolerance

        Returns:
            List of (post, score) tuples sorted by score, best first
        """
        query = query.strip().lower()
        if not query:
            return [(post, 100.0) for post in posts]

        index = {i: self._search_text(post) for i, post in enumerate(posts)}

        # partial_ratio finds the query as a fuzzy substring of the target text
        matches = process.extract(
            query,
            index,
            scorer=fuzz.partial_ratio,
            score_cutoff=self.threshold,
            limit=None,
        )

        logger.debug(f"Fuzzy search for '{query}' matched {len(matches)} of {len(posts)} posts")
        # process.extract with a dict returns (value, score, key)
        return [(posts[key], score) for _, score, key in matches]

    def filter(self, posts: Sequence[Post], query: str | None) -> list[Post]:
        """Return only the posts matching the query, best first."""
        if not query:
            return list(posts)
        return [post for post, _ in self.search(posts, query)]
