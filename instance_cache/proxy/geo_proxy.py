"""Caching proxy in front of a geocoder.

GeoProxy exposes the same get_lat_lng() interface as GeoCoder but answers
repeated addresses from its cache instead of asking the geocoder again.
"""

import logging

from instance_cache.consts import KNOWN_COORDINATES
from instance_cache.errors import InvalidKeyError
from instance_cache.storage.cache.instance_cache import KeyedInstanceCache

logger = logging.getLogger(__name__)

# Cache name for geocoded addresses
GEO_CACHE = "geocodes"


def _normalize_address(address: str) -> str:
    """Normalize an address for lookup: strip whitespace and casefold."""
    return address.strip().casefold()


class GeoCoder:
    """Resolves addresses to "lat, lng" strings from a fixed table.

    Unknown addresses resolve to an empty string.
    """

    def __init__(self, coordinates: dict[str, str] | None = None):
        self.coordinates = coordinates if coordinates is not None else KNOWN_COORDINATES
        self.lookups = 0

    def get_lat_lng(self, address: str) -> str:
        self.lookups += 1
        return self.coordinates.get(_normalize_address(address), "")


class GeoProxy:
    """Caching stand-in for a GeoCoder."""

    def __init__(self, geocoder: GeoCoder | None = None):
        """Initialize GeoProxy.

        Args:
            geocoder: GeoCoder to forward cache misses to. Defaults to one
                backed by KNOWN_COORDINATES.
        """
        self.geocoder = geocoder if geocoder is not None else GeoCoder()
        self._cache = KeyedInstanceCache(self.geocoder.get_lat_lng, key_fields=("address",), name=GEO_CACHE)

    @property
    def cache(self) -> KeyedInstanceCache:
        return self._cache

    def get_lat_lng(self, address: str) -> str:
        """Get coordinates for an address, consulting the geocoder only once per address.

        Args:
            address: Address to resolve. Case and surrounding whitespace are ignored.

        Returns:
            "lat, lng" string, or "" for unknown addresses.

        Raises:
            InvalidKeyError: If the address is empty.
        """
        normalized = _normalize_address(address)
        if not normalized:
            raise InvalidKeyError("Address must not be empty", (address,))

        coordinates = self._cache.get_or_create(normalized)
        logger.debug(f"{address}: {coordinates}")
        return coordinates

    def count(self) -> int:
        """Return the number of distinct addresses cached."""
        return self._cache.count()


def main() -> None:
    """Example usage of GeoProxy."""
    from instance_cache.consts import DEFAULT_GEO_REQUESTS, LOG_FORMAT

    logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)

    geo = GeoProxy()
    for address in DEFAULT_GEO_REQUESTS:
        print(f"{address}: {geo.get_lat_lng(address)}")

    print(f"\nCache size: {geo.count()}")
    print(f"Geocoder lookups: {geo.geocoder.lookups}")


if __name__ == "__main__":
    main()
