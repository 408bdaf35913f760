"""Registry key models.

Usage:
    key = RegistryKey(scheme=KeyScheme.LENGTH_PREFIXED, value="3:Oak5:Brown7:oak.jpg")
    encode = KeyScheme.HASHED.get_encoder()
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from flyweight.core.types import Fields


class KeyScheme(Enum):
    """Strategy for turning a field tuple into a canonical key string."""

    LENGTH_PREFIXED = auto()  # "<len>:<field>" per field, injective
    HASHED = auto()  # SHA-256 over the length-prefixed encoding

    def get_encoder(self) -> Callable[[Fields], str]:
        """Get the encoding function for this scheme.

        Returns:
            Pure function mapping a field tuple to its key string.
        """
        # Late import to avoid circular dependency
        from flyweight.core.identity import operations

        encoders = {
            KeyScheme.LENGTH_PREFIXED: operations.length_prefixed_encoding,
            KeyScheme.HASHED: operations.hashed_encoding,
        }
        return encoders[self]

    @classmethod
    def parse(cls, value: str | KeyScheme) -> KeyScheme:
        """Resolve a scheme from its name, case-insensitively.

        Raises:
            ValueError: If no scheme has that name.
        """
        if isinstance(value, KeyScheme):
            return value
        try:
            return cls[value.strip().upper().replace("-", "_")]
        except KeyError:
            names = ", ".join(s.name.lower() for s in cls)
            raise ValueError(f"Unknown key scheme {value!r}, expected one of: {names}") from None


@dataclass(frozen=True, slots=True)
class RegistryKey:
    """Canonical key under which a registry stores one intrinsic record.

    Keys built by different schemes never compare equal, even if their
    encoded values happen to match.
    """

    scheme: KeyScheme
    value: str

    def __str__(self) -> str:
        return self.value
