"""Local in-memory registry implementation.

Dict-based interning suitable for single-process use and testing.

Structure:
    _records[key] = record   (append-only, insertion ordered)

Usage:
    registry = LocalRegistry(record_factory=TreeType, arity=3)
    oak = registry.get_or_create(("Oak", "Brown", "oak.jpg"))
    assert registry.get_or_create(("Oak", "Brown", "oak.jpg")) is oak
"""

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Iterator, Sequence

from flyweight.config import RegistrySettings
from flyweight.core.identity import (
    InvalidFieldsError,
    KeyScheme,
    RegistryKey,
    make_key,
    validate_fields,
)
from flyweight.core.record import IntrinsicRecord, RecordFactory, TreeType
from flyweight.core.types import Fields, SharedRef
from flyweight.storage.models import RegistryStats

logger = logging.getLogger(__name__)


class ArityError(ValueError):
    """Raised when a field tuple has the wrong number of fields for a registry."""

    pass


class LocalRegistry:
    """In-memory interning registry keyed by canonical field encodings.

    Guarantees at most one record per distinct key for the registry's
    lifetime. Records are never removed.

    Args:
        record_factory: Builds a record from validated fields (default IntrinsicRecord).
            Called while the registry lock is held; it must not call back into
            the same registry, or it will deadlock.
        key_scheme: Key encoding scheme (default length-prefixed).
        arity: Required number of fields, or None for any length.
        thread_safe: Guard check-then-insert with a lock (default True).
    """

    def __init__(
        self,
        record_factory: RecordFactory = IntrinsicRecord,
        key_scheme: KeyScheme = KeyScheme.LENGTH_PREFIXED,
        arity: int | None = None,
        thread_safe: bool = True,
    ):
        """Initialize an empty registry.

        Raises:
            ValueError: If arity is negative.
        """
        if arity is not None and arity < 0:
            raise ValueError(f"Arity must be non-negative, got {arity}")
        self._record_factory = record_factory
        self._key_scheme = key_scheme
        self._arity = arity
        self._records: dict[RegistryKey, IntrinsicRecord] = {}
        self._lock: contextlib.AbstractContextManager[object] = (
            threading.Lock() if thread_safe else contextlib.nullcontext()
        )
        self._hits = 0
        self._misses = 0

    @classmethod
    def from_settings(
        cls,
        settings: RegistrySettings | None = None,
        record_factory: RecordFactory = IntrinsicRecord,
        arity: int | None = None,
    ) -> LocalRegistry:
        """Build a registry from settings (environment by default).

        Args:
            settings: Registry settings; loaded from FLYWEIGHT_* if None.
            record_factory: Builds a record from validated fields.
            arity: Required number of fields, or None for any length.

        Returns:
            Configured LocalRegistry.
        """
        settings = settings or RegistrySettings()
        return cls(
            record_factory=record_factory,
            key_scheme=settings.key_scheme,
            arity=arity,
            thread_safe=settings.thread_safe,
        )

    @property
    def key_scheme(self) -> KeyScheme:
        return self._key_scheme

    @property
    def arity(self) -> int | None:
        return self._arity

    def _normalize(self, fields: Sequence[str]) -> Fields:
        """Validate field types and, when fixed, the field count."""
        normalized = validate_fields(fields)
        if self._arity is not None and len(normalized) != self._arity:
            raise ArityError(
                f"Registry expects {self._arity} fields, got {len(normalized)}: {normalized!r}"
            )
        return normalized

    def key_for(self, fields: Sequence[str]) -> RegistryKey:
        """Compute the canonical key for a field tuple.

        Args:
            fields: Field values in their fixed order.

        Returns:
            Key under which the fields' record is (or would be) stored.

        Raises:
            InvalidFieldsError: If fields are not all strings.
            ArityError: If the registry has a fixed arity and it does not match.
        """
        return make_key(self._normalize(fields), self._key_scheme)

    def get_or_create(self, fields: Sequence[str]) -> SharedRef[IntrinsicRecord]:
        """Return the record for fields, interning a new one on first request.

        Lookup and insert happen under one lock, so concurrent callers with
        the same key always receive the same object.

        Args:
            fields: Field values in their fixed order.

        Returns:
            The shared record for these fields.

        Raises:
            InvalidFieldsError: If fields are not all strings.
            ArityError: If the registry has a fixed arity and it does not match.
        """
        normalized = self._normalize(fields)
        key = make_key(normalized, self._key_scheme)
        with self._lock:
            record = self._records.get(key)
            if record is not None:
                self._hits += 1
                return record
            record = self._record_factory(normalized)
            self._records[key] = record
            self._misses += 1
        logger.debug(f"Interned new {type(record).__name__} under key {key.value!r}")
        return record

    def get(self, fields: Sequence[str]) -> SharedRef[IntrinsicRecord] | None:
        """Look up the record for fields without creating it.

        Args:
            fields: Field values in their fixed order.

        Returns:
            The shared record, or None if never interned.
        """
        return self._records.get(self.key_for(fields))

    def keys(self) -> Iterator[RegistryKey]:
        """Iterate keys in insertion order.

        Yields:
            Each interned RegistryKey.
        """
        yield from list(self._records)

    def stats(self) -> RegistryStats:
        """Snapshot of size and hit/miss counters.

        Returns:
            RegistryStats for this registry.
        """
        with self._lock:
            return RegistryStats(size=len(self._records), hits=self._hits, misses=self._misses)

    def __contains__(self, fields: object) -> bool:
        if not isinstance(fields, (tuple, list)):
            return False
        try:
            key = self.key_for(fields)
        except (InvalidFieldsError, ArityError):
            return False
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SharedRef[IntrinsicRecord]]:
        yield from list(self._records.values())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(size={len(self._records)}, "
            f"key_scheme={self._key_scheme.name}, arity={self._arity})"
        )


def tree_type_registry(settings: RegistrySettings | None = None) -> LocalRegistry:
    """Registry interning TreeType records from (name, color, texture).

    Args:
        settings: Registry settings; loaded from FLYWEIGHT_* if None.

    Returns:
        LocalRegistry producing TreeType with arity 3.
    """
    return LocalRegistry.from_settings(settings, record_factory=TreeType, arity=TreeType.ARITY)
