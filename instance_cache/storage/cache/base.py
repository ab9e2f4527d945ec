"""Abstract base class for keyed get-or-create caches.

Keyed caches hand out shared entries: the first request for a key builds the
entry, every later request with an equal key receives that same object.
Entries are never evicted, replaced or deleted.
"""

from abc import ABC, abstractmethod
from typing import Any

from instance_cache.models.model_cache import CacheStats
from instance_cache.storage.cache.keys import CacheKey


class KeyedCache(ABC):
    """Abstract base class for keyed instance caches.

    Provides a consistent get-or-create interface over shared entries keyed
    by their defining fields.
    """

    @abstractmethod
    def get_or_create(self, *fields: Any) -> Any:
        """Return the shared entry for the given key fields, building it on first use.

        Args:
            *fields: Values that jointly determine the entry's identity.

        Returns:
            The entry stored for the derived key.
        """
        ...

    @abstractmethod
    def count(self) -> int:
        """Return the number of distinct entries stored."""
        ...

    @abstractmethod
    def contains(self, *fields: Any) -> bool:
        """Check if an entry exists for the given key fields.

        Args:
            *fields: Values that jointly determine the entry's identity.

        Returns:
            True if an entry is stored, False otherwise.
        """
        ...

    @abstractmethod
    def keys(self) -> list[CacheKey]:
        """List stored keys in insertion order."""
        ...

    @abstractmethod
    def get_stats(self) -> CacheStats:
        """Get cache statistics."""
        ...

    def __len__(self) -> int:
        return self.count()
