"""Pydantic models for instance-cache."""

from instance_cache.models.model_cache import CacheStats
from instance_cache.models.model_computer import Computer, ComputerSpec

__all__ = [
    "CacheStats",
    "Computer",
    "ComputerSpec",
]
