"""Flyweight factories built on the keyed instance cache."""

from instance_cache.flyweight.computer_factory import ComputerCollection, ComputerFactory

__all__ = [
    "ComputerCollection",
    "ComputerFactory",
]
