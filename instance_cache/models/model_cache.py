"""Cache statistics models."""

from datetime import datetime

from pydantic import BaseModel, Field, computed_field

from instance_cache.models.common import _utc_now


class CacheStats(BaseModel):
    """Snapshot of a keyed cache's counters."""

    name: str
    entries: int = Field(ge=0, description="Distinct entries stored")
    hits: int = Field(default=0, ge=0, description="Requests served from an existing entry")
    misses: int = Field(default=0, ge=0, description="Requests that built a new entry")
    failures: int = Field(default=0, ge=0, description="Constructions that raised")
    taken_at: datetime = Field(default_factory=_utc_now)

    @computed_field
    @property
    def requests(self) -> int:
        """Total successful requests."""
        return self.hits + self.misses

    @computed_field
    @property
    def hit_rate(self) -> float:
        """Fraction of successful requests served from an existing entry."""
        if self.requests == 0:
            return 0.0
        return self.hits / self.requests
