"""CacheStorage backed by a `diskcache.Cache` directory.

Entries are written with no expiry, so they survive process restarts until
removed. Serialization is left entirely to diskcache.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

import diskcache as dc

# Domain Layer Imports
from custsvc.domain.interfaces.cache import CacheStorage, ExpectedType, check_type
from custsvc.domain.models.common import CacheKey

logger = logging.getLogger(__name__)


class DiskCacheStorage(CacheStorage):
    """Disk-backed cache storage."""

    persistent = True

    def __init__(self, cache_dir: Union[str, Path], timeout: float = 1):
        """Opens (creating if needed) the cache directory.

        Args:
            cache_dir: Directory holding the diskcache database.
            timeout: SQLite connection timeout in seconds.
        """
        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self._cache = dc.Cache(str(self.cache_dir), timeout=timeout)
        logger.info(f"Initialized disk cache storage at: {self._cache.directory}")

    def store(self, key: CacheKey, value: Any) -> None:
        self._cache.set(key, value, expire=None)
        logger.debug(f"Disk cache PUT key: {key}")

    def retrieve(self, key: CacheKey, expected_type: Optional[ExpectedType] = None) -> Optional[Any]:
        value = self._cache.get(key, default=None)
        if value is None:
            logger.debug(f"Disk cache MISS for key: {key}")
            return None
        logger.debug(f"Disk cache HIT for key: {key}")
        return check_type(key, value, expected_type)

    def remove(self, key: CacheKey) -> None:
        if self._cache.delete(key):
            logger.debug(f"Disk cache DELETE key: {key}")

    def contains(self, key: CacheKey) -> bool:
        return key in self._cache

    def clear(self) -> None:
        count = self._cache.clear()
        logger.info(f"Cleared disk cache at {self.cache_dir}. Removed {count} items.")

    def close(self) -> None:
        """Closes the underlying cache handle."""
        self._cache.close()

    def __enter__(self) -> "DiskCacheStorage":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
