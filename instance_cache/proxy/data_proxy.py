"""Caching proxy in front of a key/value data store."""

import logging

from instance_cache.consts import DATA_STORE_VALUES
from instance_cache.storage.cache.instance_cache import KeyedInstanceCache

logger = logging.getLogger(__name__)

# Cache name for data store reads
DATA_CACHE = "data_store"


class DataStore:
    """Slow backing store. Unknown keys read as an empty string."""

    def __init__(self, values: dict[str, str] | None = None):
        self.values = values if values is not None else DATA_STORE_VALUES
        self.reads = 0

    def get_data(self, key: str) -> str:
        self.reads += 1
        return self.values.get(key, "")


class DataProxy:
    """Caching stand-in for a DataStore."""

    def __init__(self, store: DataStore | None = None):
        self.store = store if store is not None else DataStore()
        self._cache = KeyedInstanceCache(self.store.get_data, key_fields=("key",), name=DATA_CACHE)

    @property
    def cache(self) -> KeyedInstanceCache:
        return self._cache

    def get_data(self, key: str) -> str:
        value = self._cache.get_or_create(key)
        logger.debug(f"{key}: {value}")
        return value

    def count(self) -> int:
        return self._cache.count()
