"""Custom errors for the instance cache."""

from typing import Any


class CacheError(RuntimeError):
    """Base class for all cache errors."""


class InvalidKeyError(CacheError):
    """Key fields are absent, of the wrong arity, or not stably comparable."""

    def __init__(self, message: str, fields: tuple[Any, ...] = ()):
        self.fields = fields
        super().__init__(message)


class ConstructionFailedError(CacheError):
    """The entry factory raised while building a new entry.

    The key stays unoccupied so a later request may try again.
    """

    def __init__(self, key: Any, original_error: Exception):
        self.key = key
        self.original_error = original_error
        super().__init__(
            f"Failed to construct entry for {key}: "
            f"{type(original_error).__name__}: {original_error}"
        )
