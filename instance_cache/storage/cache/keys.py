"""Structured composite keys for the instance cache.

Keys wrap the tuple of fields that define an entry's identity. Fields are
kept as a tuple rather than joined into a string, so ("A", "BC") and
("AB", "C") stay distinct.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from instance_cache.errors import InvalidKeyError

# Scalar types accepted as key fields (bool is a subclass of int)
_SCALAR_TYPES = (str, int, float, Enum)


@dataclass(frozen=True)
class CacheKey:
    """Immutable composite key derived from an entry's defining fields."""

    fields: tuple[Any, ...]

    def __str__(self) -> str:
        return repr(self.fields)


def _validate_field(value: Any, fields: tuple[Any, ...]) -> None:
    """Raise InvalidKeyError unless value is a stable, hashable key field."""
    if value is None:
        raise InvalidKeyError("Key field is absent (None)", fields)

    if isinstance(value, tuple):
        for item in value:
            _validate_field(item, fields)
        return

    if not isinstance(value, _SCALAR_TYPES):
        raise InvalidKeyError(
            f"Unsupported key field type {type(value).__name__}: expected str, number, enum or tuple",
            fields,
        )

    # NaN never equals itself, so it can never be found again
    if isinstance(value, float) and math.isnan(value):
        raise InvalidKeyError("Key field is NaN", fields)


def derive_key(*fields: Any, arity: int | None = None) -> CacheKey:
    """Derive a CacheKey from one or more key fields.

    Args:
        *fields: Values that jointly determine entry identity.
        arity: Expected number of fields. None accepts any non-zero count.

    Returns:
        CacheKey wrapping the fields.

    Raises:
        InvalidKeyError: If no fields are given, the arity does not match, or a
            field is None, NaN, or not a str/number/enum/tuple thereof.
    """
    if not fields:
        raise InvalidKeyError("At least one key field is required", fields)

    if arity is not None and len(fields) != arity:
        raise InvalidKeyError(f"Expected {arity} key fields, got {len(fields)}", fields)

    for value in fields:
        _validate_field(value, fields)

    return CacheKey(fields=tuple(fields))
