"""Tree entities: unique position plus a shared tree type.

Usage:
    registry = tree_type_registry()
    tree = Tree.create((10, 20), ("Oak", "Brown", "oak.jpg"), registry)
    tree.draw("Monitor")
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from flyweight.core.record import IntrinsicRecord, format_coordinate
from flyweight.core.types import SharedRef
from flyweight.storage.protocol import Registry


@dataclass(frozen=True, slots=True)
class Position:
    """Extrinsic coordinates of a single placement."""

    x: float
    y: float

    @classmethod
    def coerce(cls, value: Position | tuple[float, float]) -> Position:
        """Accept a Position or an (x, y) pair."""
        if isinstance(value, Position):
            return value
        x, y = value
        return cls(float(x), float(y))


class Tree:
    """One placed tree.

    Holds its own position and a non-owning reference to a shared record.
    Many trees may reference the same record; dropping a tree never affects
    the record, which lives as long as its registry.
    """

    __slots__ = ("_position", "_tree_type")

    def __init__(self, position: Position, tree_type: SharedRef[IntrinsicRecord]) -> None:
        self._position = position
        self._tree_type = tree_type

    @classmethod
    def create(
        cls,
        position: Position | tuple[float, float],
        fields: Sequence[str],
        registry: Registry,
    ) -> Tree:
        """Place a tree, obtaining its shared type from the registry.

        Args:
            position: Coordinates for this tree.
            fields: Intrinsic fields, e.g. (name, color, texture).
            registry: Registry that owns the shared records.

        Returns:
            New Tree referencing the registry's record for fields.
        """
        return cls(Position.coerce(position), registry.get_or_create(fields))

    @property
    def position(self) -> Position:
        return self._position

    @property
    def tree_type(self) -> SharedRef[IntrinsicRecord]:
        return self._tree_type

    def draw(self, canvas: str) -> str:
        """Draw via the shared record, passing this tree's own coordinates."""
        return self._tree_type.draw(canvas, self._position.x, self._position.y)

    def describe(self) -> dict[str, Any]:
        """Position plus the shared record, with the record's id() to expose sharing."""
        return {
            "x": self._position.x,
            "y": self._position.y,
            "tree_type": self._tree_type.describe(),
            "tree_type_id": id(self._tree_type),
        }

    def __repr__(self) -> str:
        x, y = format_coordinate(self._position.x), format_coordinate(self._position.y)
        return f"Tree(x={x}, y={y}, tree_type={self._tree_type!r})"
