"""In-process CacheStorage backed by a dictionary.

Entries never expire and are never evicted; they live until removed or
cleared. A re-entrant lock guards the dictionary so one instance can be
shared between threads.
"""

import logging
from threading import RLock
from typing import Any, Dict, Optional

# Domain Layer Imports
from custsvc.domain.interfaces.cache import CacheStorage, ExpectedType, check_type
from custsvc.domain.models.common import CacheKey

logger = logging.getLogger(__name__)


class InMemoryCacheStorage(CacheStorage):
    """Dictionary-backed cache storage."""

    def __init__(self):
        self._entries: Dict[CacheKey, Any] = {}
        self._lock = RLock()
        logger.info("InMemoryCacheStorage initialized.")

    def store(self, key: CacheKey, value: Any) -> None:
        with self._lock:
            self._entries[key] = value
        logger.debug(f"Stored item in memory cache: key={key}")

    def retrieve(self, key: CacheKey, expected_type: Optional[ExpectedType] = None) -> Optional[Any]:
        with self._lock:
            value = self._entries.get(key)
        if value is None:
            logger.debug(f"Memory cache MISS for key: {key}")
            return None
        logger.debug(f"Memory cache HIT for key: {key}")
        return check_type(key, value, expected_type)

    def remove(self, key: CacheKey) -> None:
        with self._lock:
            removed = self._entries.pop(key, None) is not None
        if removed:
            logger.debug(f"Removed item from memory cache: key={key}")

    def contains(self, key: CacheKey) -> bool:
        with self._lock:
            return key in self._entries

    def clear(self) -> None:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.info(f"Cleared memory cache. Removed {count} items.")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
