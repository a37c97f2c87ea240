"""On-disk caches for generated feeds."""

from sfm.cache.base import DiskCacheStore
from sfm.cache.feed import FeedCache

__all__ = [
    "DiskCacheStore",
    "FeedCache",
]
