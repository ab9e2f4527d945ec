"""Shared-instance cache with flyweight and caching-proxy front ends."""

from instance_cache.errors import CacheError, ConstructionFailedError, InvalidKeyError
from instance_cache.storage import CacheKey, KeyedCache, KeyedInstanceCache, derive_key

__all__ = [
    "CacheError",
    "CacheKey",
    "ConstructionFailedError",
    "InvalidKeyError",
    "KeyedCache",
    "KeyedInstanceCache",
    "derive_key",
]
