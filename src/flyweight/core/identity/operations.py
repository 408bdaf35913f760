"""Pure key-construction functions.

All encoders are injective over tuples of strings: two tuples map to the same
key string only if they are equal. The plain concatenation "".join(fields) is
deliberately absent since ("A", "B", "C") and ("AB", "", "C") would collide.
"""

from __future__ import annotations

import hashlib
from collections.abc import Sequence

from flyweight.core.identity.models import KeyScheme, RegistryKey
from flyweight.core.types import Fields


class InvalidFieldsError(TypeError):
    """Raised when a field tuple is not a sequence of strings."""

    pass


def validate_fields(fields: Sequence[str]) -> Fields:
    """Normalize fields to a tuple, checking every value is a string.

    Args:
        fields: Tuple or list of field values.

    Returns:
        The fields as a tuple.

    Raises:
        InvalidFieldsError: If fields is not a tuple/list, or holds a non-str.
    """
    if not isinstance(fields, (tuple, list)):
        raise InvalidFieldsError(
            f"Fields must be a tuple of strings, got {type(fields).__name__}"
        )
    for position, value in enumerate(fields):
        if not isinstance(value, str):
            raise InvalidFieldsError(
                f"Field {position} must be str, got {type(value).__name__}: {value!r}"
            )
    return tuple(fields)


def length_prefixed_encoding(fields: Fields) -> str:
    """Encode each field as "<length>:<field>" and concatenate.

    Example:
        >>> length_prefixed_encoding(("AB", "", "C"))
        '2:AB0:1:C'
    """
    return "".join(f"{len(value)}:{value}" for value in fields)


def hashed_encoding(fields: Fields) -> str:
    """SHA-256 hex digest of the length-prefixed encoding.

    Fixed-size keys regardless of field length. Lone surrogates are encoded
    with "surrogatepass" so every str field hashes, as under LENGTH_PREFIXED.
    """
    encoded = length_prefixed_encoding(fields).encode("utf-8", "surrogatepass")
    return hashlib.sha256(encoded).hexdigest()


def make_key(
    fields: Sequence[str], scheme: KeyScheme = KeyScheme.LENGTH_PREFIXED
) -> RegistryKey:
    """Build the canonical registry key for a field tuple.

    Args:
        fields: Field values in their fixed order.
        scheme: Encoding scheme (default length-prefixed).

    Returns:
        RegistryKey for the fields.

    Raises:
        InvalidFieldsError: If fields are not all strings.
    """
    normalized = validate_fields(fields)
    return RegistryKey(scheme=scheme, value=scheme.get_encoder()(normalized))
