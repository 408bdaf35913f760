"""Core functionalities: stateless, immutable building blocks.

Architecture Note:
    core/ contains pure value types and functions: key encoders and the
    immutable records they identify. For stateful services, see storage/
    (the interning registry) and forest/ (its consumers).
"""

from flyweight.core.identity import (
    InvalidFieldsError,
    KeyScheme,
    RegistryKey,
    hashed_encoding,
    length_prefixed_encoding,
    make_key,
    validate_fields,
)
from flyweight.core.record import IntrinsicRecord, RecordFactory, TreeType
from flyweight.core.types import Fields, SharedRef

__all__ = [
    # Types
    "Fields",
    "SharedRef",
    # Identity
    "KeyScheme",
    "RegistryKey",
    "InvalidFieldsError",
    "make_key",
    "validate_fields",
    "length_prefixed_encoding",
    "hashed_encoding",
    # Records
    "IntrinsicRecord",
    "TreeType",
    "RecordFactory",
]
