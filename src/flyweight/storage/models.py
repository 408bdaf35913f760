"""Registry bookkeeping models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RegistryStats:
    """Point-in-time counters for a registry.

    Attributes:
        size: Number of interned records.
        hits: get_or_create calls answered from the registry.
        misses: get_or_create calls that created a record.
    """

    size: int
    hits: int = 0
    misses: int = 0

    @property
    def hit_ratio(self) -> float:
        """Fraction of get_or_create calls served without allocation."""
        total = self.hits + self.misses
        return self.hits / total if total else 0.0
