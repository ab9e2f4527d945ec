"""Storage backends for shared instances.

This module provides:
- KeyedCache: Abstract base class for get-or-create caches
- KeyedInstanceCache: Thread-safe in-memory implementation
- CacheKey / derive_key: Structured composite keys
"""

from instance_cache.storage.cache.base import KeyedCache
from instance_cache.storage.cache.instance_cache import KeyedInstanceCache
from instance_cache.storage.cache.keys import CacheKey, derive_key

__all__ = [
    "CacheKey",
    "KeyedCache",
    "KeyedInstanceCache",
    "derive_key",
]
