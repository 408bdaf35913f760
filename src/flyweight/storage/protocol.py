"""Registry protocol for swappable backends.

The registry is the only owner of intrinsic records and the only place that
creates them. Consumers hold references obtained through get_or_create.

Usage:
    registry = LocalRegistry(record_factory=TreeType)
    forest = Forest(registry=registry)
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Protocol

from flyweight.core.identity import RegistryKey
from flyweight.core.record import IntrinsicRecord
from flyweight.core.types import SharedRef
from flyweight.storage.models import RegistryStats


class Registry(Protocol):
    """Abstract interning registry. Implementations own the actual records."""

    def key_for(self, fields: Sequence[str]) -> RegistryKey:
        """Compute the canonical key for a field tuple."""
        ...

    def get_or_create(self, fields: Sequence[str]) -> SharedRef[IntrinsicRecord]:
        """Return the record interned under fields' key, creating it if absent."""
        ...

    def get(self, fields: Sequence[str]) -> SharedRef[IntrinsicRecord] | None:
        """Return the interned record without creating one."""
        ...

    def keys(self) -> Iterator[RegistryKey]:
        """Iterate keys in insertion order."""
        ...

    def stats(self) -> RegistryStats:
        """Snapshot of registry counters."""
        ...

    def __contains__(self, fields: object) -> bool: ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[SharedRef[IntrinsicRecord]]: ...
