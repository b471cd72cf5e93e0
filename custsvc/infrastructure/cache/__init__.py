"""Cache Storage Implementations.

Concrete CacheStorage adapters: in-memory, disk-backed (diskcache) and a
pass-through storage that never holds anything.
Bounded Context: Cache Management
"""

from custsvc.infrastructure.cache.disk_storage import DiskCacheStorage
from custsvc.infrastructure.cache.memory_storage import InMemoryCacheStorage
from custsvc.infrastructure.cache.null_storage import NullCacheStorage

__all__ = ["DiskCacheStorage", "InMemoryCacheStorage", "NullCacheStorage"]
