"""Pass-through CacheStorage that never holds anything.

Every retrieve misses, so services using it always go to their data source.
Selected with the 'none' cache backend.
"""

import logging
from typing import Any, Optional

from custsvc.domain.interfaces.cache import CacheStorage, ExpectedType
from custsvc.domain.models.common import CacheKey

logger = logging.getLogger(__name__)


class NullCacheStorage(CacheStorage):
    """Cache storage that discards every store."""

    def store(self, key: CacheKey, value: Any) -> None:
        logger.debug(f"Null cache discarding store for key: {key}")

    def retrieve(self, key: CacheKey, expected_type: Optional[ExpectedType] = None) -> Optional[Any]:
        return None

    def remove(self, key: CacheKey) -> None:
        pass

    def contains(self, key: CacheKey) -> bool:
        return False

    def clear(self) -> None:
        pass
