"""Intrinsic record models.

Records hold the state shared by many consumers. They are created by a
registry, never directly by client code, and carry no extrinsic state:
everything position-specific is passed in at call time.

Usage:
    registry = tree_type_registry()
    oak = registry.get_or_create(("Oak", "Brown", "oak.jpg"))
    oak.draw("Monitor", 10, 20)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from flyweight.core.types import Fields

logger = logging.getLogger(__name__)


def format_coordinate(value: float) -> str:
    """Render a coordinate without losing precision.

    Whole numbers print without a fractional part ("10"), anything else uses
    the shortest round-tripping repr ("20.5", "0.1234567").
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True, slots=True)
class IntrinsicRecord:
    """Immutable field tuple shared across many entities.

    Equality and hashing depend only on the record type and its fields.
    """

    fields: Fields

    def render(self, canvas: str, x: float, y: float) -> str:
        """Format the trace line for drawing this record at (x, y)."""
        values = ", ".join(self.fields)
        return (
            f"[RECORD]: drawing ({values}) on {canvas} "
            f"at x = {format_coordinate(x)}; y = {format_coordinate(y)}"
        )

    def draw(self, canvas: str, x: float, y: float) -> str:
        """Draw at the given extrinsic position.

        The line is emitted on this module's logger at INFO and returned.

        Args:
            canvas: Opaque label of the drawing target.
            x: Horizontal coordinate supplied by the caller.
            y: Vertical coordinate supplied by the caller.

        Returns:
            The rendered trace line.
        """
        line = self.render(canvas, x, y)
        logger.info(line)
        return line

    def describe(self) -> dict[str, Any]:
        """JSON-friendly description of the shared state."""
        return {"type": type(self).__name__, "fields": list(self.fields)}


@dataclass(frozen=True, slots=True)
class TreeType(IntrinsicRecord):
    """Shared tree data: name, color and texture."""

    ARITY = 3

    def __post_init__(self) -> None:
        if len(self.fields) != self.ARITY:
            raise ValueError(
                f"TreeType needs {self.ARITY} fields (name, color, texture), "
                f"got {len(self.fields)}"
            )

    @property
    def name(self) -> str:
        return self.fields[0]

    @property
    def color(self) -> str:
        return self.fields[1]

    @property
    def texture(self) -> str:
        return self.fields[2]

    def render(self, canvas: str, x: float, y: float) -> str:
        return (
            f"[TREE]: drawing {self.name} ({self.color}, {self.texture}) "
            f"on {canvas} at x = {format_coordinate(x)}; y = {format_coordinate(y)}"
        )

    def describe(self) -> dict[str, Any]:
        return {
            "type": type(self).__name__,
            "name": self.name,
            "color": self.color,
            "texture": self.texture,
        }


type RecordFactory = Callable[[Fields], IntrinsicRecord]
"""Callable a registry uses to build a record from validated fields."""
