"""Pytest configuration and fixtures."""

import pytest

from instance_cache.flyweight.computer_factory import ComputerCollection, ComputerFactory
from instance_cache.proxy.data_proxy import DataProxy, DataStore
from instance_cache.proxy.geo_proxy import GeoCoder, GeoProxy
from instance_cache.storage.cache.instance_cache import KeyedInstanceCache


class RecordingFactory:
    """Entry factory that records every call and builds a fresh dict per call."""

    def __init__(self):
        self.calls: list[tuple] = []

    def __call__(self, *fields):
        self.calls.append(fields)
        return {"fields": fields}


@pytest.fixture
def recording_factory() -> RecordingFactory:
    """Create a factory that records its calls."""
    return RecordingFactory()


@pytest.fixture
def instance_cache(recording_factory: RecordingFactory) -> KeyedInstanceCache:
    """Create a fresh KeyedInstanceCache backed by the recording factory."""
    return KeyedInstanceCache(recording_factory, name="test")


@pytest.fixture
def computer_factory() -> ComputerFactory:
    """Create a ComputerFactory with its own cache."""
    return ComputerFactory()


@pytest.fixture
def computer_collection(computer_factory: ComputerFactory) -> ComputerCollection:
    """Create an empty ComputerCollection."""
    return ComputerCollection(computer_factory)


@pytest.fixture
def geocoder() -> GeoCoder:
    """Create a GeoCoder backed by the known coordinates."""
    return GeoCoder()


@pytest.fixture
def geo_proxy(geocoder: GeoCoder) -> GeoProxy:
    """Create a GeoProxy in front of the geocoder fixture."""
    return GeoProxy(geocoder)


@pytest.fixture
def data_proxy() -> DataProxy:
    """Create a DataProxy in front of a default DataStore."""
    return DataProxy(DataStore())
