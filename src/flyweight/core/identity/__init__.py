"""Canonical keys for intrinsic records: key models and encoders."""

from flyweight.core.identity.models import KeyScheme, RegistryKey
from flyweight.core.identity.operations import (
    InvalidFieldsError,
    hashed_encoding,
    length_prefixed_encoding,
    make_key,
    validate_fields,
)

__all__ = [
    "KeyScheme",
    "RegistryKey",
    "InvalidFieldsError",
    "make_key",
    "validate_fields",
    "length_prefixed_encoding",
    "hashed_encoding",
]
