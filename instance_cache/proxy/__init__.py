"""Caching proxies built on the keyed instance cache."""

from instance_cache.proxy.data_proxy import DataProxy, DataStore
from instance_cache.proxy.geo_proxy import GeoCoder, GeoProxy

__all__ = [
    "DataProxy",
    "DataStore",
    "GeoCoder",
    "GeoProxy",
]
