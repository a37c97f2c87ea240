"""DiskCache-backed key-value store shared by cache implementations."""

import logging
from pathlib import Path
from typing import Any

from diskcache import Cache

from sfm.exceptions import CacheError

logger = logging.getLogger(__name__)

DEFAULT_CACHE_ROOT = Path.home() / ".sfm" / "cache"


class DiskCacheStore:
    """Namespaced on-disk store with optional per-entry expiry."""

    def __init__(self, namespace: str, cache_root: Path | None = None) -> None:
        """Open (and create if needed) the store under cache_root/namespace.

        Raises:
            CacheError: If the cache directory cannot be created
        """
        self.namespace = namespace
        self.cache_path = (cache_root or DEFAULT_CACHE_ROOT) / namespace

        try:
            self.cache_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheError(f"Cannot create cache directory {self.cache_path}: {e}") from e

        self.cache = Cache(str(self.cache_path))
        logger.debug(f"Opened {namespace} cache at {self.cache_path}")

    def __len__(self) -> int:
        return len(self.cache)

    def __contains__(self, key: str) -> bool:
        return key in self.cache

    def get(self, key: str) -> Any | None:
        """Stored value, or None when missing, expired or unreadable."""
        try:
            return self.cache.get(key)
        except Exception as e:
            logger.debug(f"Error reading cache key {key}: {e}")
            return None

    def set(self, key: str, value: Any, ttl_hours: float | None = None) -> None:
        """Store a value; it expires after ttl_hours when given.

        Write failures are logged and ignored.
        """
        expire = ttl_hours * 3600 if ttl_hours is not None else None
        try:
            self.cache.set(key, value, expire=expire)
        except Exception as e:
            logger.error(f"Error writing cache key {key}: {e}")

    def clear(self) -> None:
        """Drop every entry in this namespace."""
        removed = self.cache.clear()
        logger.info(f"Cleared {removed} entries from the {self.namespace} cache")
