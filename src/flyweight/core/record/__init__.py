"""Intrinsic records: the shared, immutable flyweight payloads."""

from flyweight.core.record.models import (
    IntrinsicRecord,
    RecordFactory,
    TreeType,
    format_coordinate,
)

__all__ = [
    "IntrinsicRecord",
    "TreeType",
    "RecordFactory",
    "format_coordinate",
]
