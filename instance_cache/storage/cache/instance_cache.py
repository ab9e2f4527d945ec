"""In-memory keyed instance cache with get-or-create semantics.

Each distinct key is built exactly once by the owner-supplied factory, even
when several threads request the same new key at the same time. Failed
constructions leave the key unoccupied so a later request may retry.
"""

import logging
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from instance_cache.consts import DEFAULT_CACHE_NAME
from instance_cache.errors import ConstructionFailedError, InvalidKeyError
from instance_cache.models.model_cache import CacheStats
from instance_cache.storage.cache.base import KeyedCache
from instance_cache.storage.cache.keys import CacheKey, derive_key

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass
class _Construction:
    """Lock for one key being built, with the number of callers holding or awaiting it."""

    lock: threading.Lock = field(default_factory=threading.Lock)
    callers: int = 0


class KeyedInstanceCache(KeyedCache):
    """Unbounded get-or-create cache of shared entries.

    Entries are never evicted or replaced; the cache lives as long as its owner.
    Construction is serialized per key: callers racing on a new key all receive
    the single entry built by the winner, while different keys build in parallel.
    """

    def __init__(
        self,
        factory: Callable[..., Any],
        key_fields: Sequence[str] | None = None,
        name: str = DEFAULT_CACHE_NAME,
    ):
        """Initialize KeyedInstanceCache.

        Args:
            factory: Called with the key fields to build a new entry.
            key_fields: Optional names of the key fields. Fixes the expected arity.
                If omitted, the arity of the first requested key is used.
            name: Label used in logs and statistics.
        """
        self._factory = factory
        self.key_fields = tuple(key_fields) if key_fields is not None else None
        self.name = name

        self._entries: dict[CacheKey, Any] = {}
        self._lock = threading.Lock()
        # Constructions in flight; dropped once no caller holds or awaits the lock
        self._building: dict[CacheKey, _Construction] = {}
        self._arity = len(self.key_fields) if self.key_fields is not None else None

        self._hits = 0
        self._misses = 0
        self._failures = 0

        logger.info(f"KeyedInstanceCache '{name}' initialized (key_fields={self.key_fields})")

    @property
    def arity(self) -> int | None:
        """Number of key fields, or None until the first key is requested."""
        return self._arity

    def _derive(self, fields: tuple[Any, ...], record: bool = False) -> CacheKey:
        """Derive a key, holding every key of this cache to one arity.

        Args:
            fields: Key fields.
            record: Fix the arity from this key if none is set yet.

        Raises:
            InvalidKeyError: If the fields cannot form a key or their count
                differs from the cache's arity.
        """
        key = derive_key(*fields, arity=self._arity)
        with self._lock:
            if self._arity is None:
                if record:
                    self._arity = len(key.fields)
            elif len(key.fields) != self._arity:
                # Another caller fixed the arity after derive_key ran
                raise InvalidKeyError(
                    f"Expected {self._arity} key fields, got {len(key.fields)}", fields
                )
        return key

    def _lookup(self, key: CacheKey) -> Any:
        """Return the stored entry and count a hit, or _MISSING. Caller holds self._lock."""
        entry = self._entries.get(key, _MISSING)
        if entry is not _MISSING:
            self._hits += 1
        return entry

    def get_or_create(self, *fields: Any) -> Any:
        """Return the shared entry for the given key fields, building it on first use.

        Args:
            *fields: Values that jointly determine the entry's identity.

        Returns:
            The entry stored for the derived key. Equal keys always yield the
            identical object.

        Raises:
            InvalidKeyError: If the fields cannot form a stable key.
            ConstructionFailedError: If the factory raised. Nothing is stored.
        """
        key = self._derive(fields, record=True)

        with self._lock:
            entry = self._lookup(key)
            if entry is not _MISSING:
                logger.debug(f"Cache hit in '{self.name}' for key={key}")
                return entry
            construction = self._building.get(key)
            if construction is None:
                construction = self._building[key] = _Construction()
            construction.callers += 1

        try:
            with construction.lock:
                # Another caller may have finished building while we waited
                with self._lock:
                    entry = self._lookup(key)
                if entry is not _MISSING:
                    logger.debug(f"Cache hit in '{self.name}' for key={key} after waiting")
                    return entry

                try:
                    entry = self._factory(*fields)
                except Exception as e:
                    with self._lock:
                        self._failures += 1
                    logger.warning(f"Construction failed in '{self.name}' for key={key}: {e}")
                    raise ConstructionFailedError(key, e) from e

                with self._lock:
                    self._entries[key] = entry
                    self._misses += 1
        finally:
            with self._lock:
                construction.callers -= 1
                if construction.callers == 0:
                    del self._building[key]

        logger.debug(f"Cache miss in '{self.name}': created entry for key={key}")
        return entry

    def count(self) -> int:
        """Return the number of distinct entries stored."""
        with self._lock:
            return len(self._entries)

    def contains(self, *fields: Any) -> bool:
        """Check if an entry exists for the given key fields.

        Raises:
            InvalidKeyError: If the fields cannot form a stable key.
        """
        key = self._derive(fields)
        with self._lock:
            return key in self._entries

    def keys(self) -> list[CacheKey]:
        """List stored keys in insertion order."""
        with self._lock:
            return list(self._entries)

    def get_stats(self) -> CacheStats:
        """Get cache statistics.

        Returns:
            CacheStats snapshot with entry count and hit/miss/failure counters.
        """
        with self._lock:
            return CacheStats(
                name=self.name,
                entries=len(self._entries),
                hits=self._hits,
                misses=self._misses,
                failures=self._failures,
            )


def main() -> None:
    """Example usage of KeyedInstanceCache."""
    from instance_cache.consts import LOG_FORMAT

    logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)

    cache = KeyedInstanceCache(lambda city, country: {"city": city, "country": country}, name="cities")

    print("=== KeyedInstanceCache Example ===\n")

    print("1. Requesting ('Paris', 'FR') twice...")
    first = cache.get_or_create("Paris", "FR")
    second = cache.get_or_create("Paris", "FR")
    print(f"   Same object: {first is second}")

    print("\n2. Requesting ('Lyon', 'FR')...")
    cache.get_or_create("Lyon", "FR")
    print(f"   Entries: {cache.count()}")

    print("\n3. Statistics...")
    print(f"   {cache.get_stats().model_dump()}")


if __name__ == "__main__":
    main()
