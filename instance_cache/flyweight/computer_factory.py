"""Flyweight factory and collection for computers.

Computers of the same make, model and processor share one immutable
ComputerSpec. Only memory and asset tag vary per unit, so a large inventory
holds a handful of specs no matter how many units it tracks.
"""

import logging

from instance_cache.consts import COMPUTER_KEY_FIELDS
from instance_cache.models.model_computer import Computer, ComputerSpec
from instance_cache.storage.cache.instance_cache import KeyedInstanceCache

logger = logging.getLogger(__name__)

# Cache name for computer spec flyweights
COMPUTER_SPEC_CACHE = "computer_specs"


def _build_spec(make: str, model: str, processor: str) -> ComputerSpec:
    return ComputerSpec(make=make, model=model, processor=processor)


class ComputerFactory:
    """Hands out shared ComputerSpec flyweights keyed by make, model and processor.

    Uses KeyedInstanceCache internally while providing a domain-specific API.
    """

    def __init__(self, cache: KeyedInstanceCache | None = None):
        """Initialize ComputerFactory.

        Args:
            cache: Optional cache instance to use. Must build ComputerSpec entries
                from (make, model, processor). A fresh cache is created if omitted.
        """
        if cache is not None:
            self._cache = cache
        else:
            self._cache = KeyedInstanceCache(
                _build_spec,
                key_fields=COMPUTER_KEY_FIELDS,
                name=COMPUTER_SPEC_CACHE,
            )

    @property
    def cache(self) -> KeyedInstanceCache:
        return self._cache

    def get(self, make: str, model: str, processor: str) -> ComputerSpec:
        """Get the shared spec for a make/model/processor combination.

        Args:
            make: Manufacturer.
            model: Product line.
            processor: Processor family.

        Returns:
            The shared ComputerSpec; identical for equal arguments.
        """
        return self._cache.get_or_create(make, model, processor)

    def count(self) -> int:
        """Return the number of distinct specs created."""
        return self._cache.count()


class ComputerCollection:
    """Inventory of computers keyed by asset tag."""

    def __init__(self, factory: ComputerFactory):
        self.factory = factory
        self._computers: dict[str, Computer] = {}

    def add(self, make: str, model: str, processor: str, memory: str, tag: str) -> Computer:
        """Add a computer to the inventory.

        Adding an existing tag replaces that computer.

        Returns:
            The new Computer referencing a shared spec.
        """
        spec = self.factory.get(make, model, processor)
        computer = Computer(spec=spec, memory=memory, tag=tag)
        if tag in self._computers:
            logger.debug(f"Replacing computer with tag={tag}")
        self._computers[tag] = computer
        return computer

    def get(self, tag: str) -> Computer | None:
        return self._computers.get(tag)

    def count(self) -> int:
        return len(self._computers)

    def computers(self) -> list[Computer]:
        return list(self._computers.values())


def main() -> None:
    """Example usage of ComputerFactory and ComputerCollection."""
    from instance_cache.consts import DEFAULT_COMPUTER_REQUESTS, LOG_FORMAT

    logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)

    factory = ComputerFactory()
    computers = ComputerCollection(factory)

    for make, model, processor, memory, tag in DEFAULT_COMPUTER_REQUESTS:
        computers.add(make, model, processor, memory, tag)

    print(f"Computers: {computers.count()}")
    print(f"Flyweights: {factory.count()}")


if __name__ == "__main__":
    main()
