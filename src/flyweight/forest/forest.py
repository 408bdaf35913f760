"""Forest: ordered collection of trees drawn together.

Usage:
    forest = Forest()
    forest.plant_tree(10, 20, "Oak", "Brown", "oak.jpg")
    forest.plant_tree(3, 25, "Oak", "Brown", "oak.jpg")
    assert len(forest.tree_types()) == 1
    forest.draw("Monitor")
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from flyweight.core.record import IntrinsicRecord
from flyweight.forest.entity import Position, Tree
from flyweight.storage.local import tree_type_registry
from flyweight.storage.protocol import Registry


class Forest:
    """Client-side aggregate of trees.

    The forest only collects and iterates trees. Sharing of tree types is
    entirely the registry's job.

    Args:
        registry: Registry to obtain tree types from. A fresh TreeType
            registry is created when omitted.
    """

    def __init__(self, registry: Registry | None = None):
        self._registry = registry if registry is not None else tree_type_registry()
        self._trees: list[Tree] = []

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def trees(self) -> tuple[Tree, ...]:
        """Snapshot of planted trees in planting order."""
        return tuple(self._trees)

    def plant_tree(self, x: float, y: float, name: str, color: str, texture: str) -> Tree:
        """Create a tree at (x, y) with a shared (name, color, texture) type and add it.

        Returns:
            The planted Tree.
        """
        tree = Tree.create(Position(float(x), float(y)), (name, color, texture), self._registry)
        self.add(tree)
        return tree

    def add(self, tree: Tree) -> None:
        """Append an already created tree."""
        self._trees.append(tree)

    def for_each(self, visit: Callable[[Tree], Any]) -> None:
        """Call visit on every tree in planting order."""
        for tree in self._trees:
            visit(tree)

    def draw(self, canvas: str) -> list[str]:
        """Draw every tree on canvas.

        Returns:
            One trace line per tree, in planting order.
        """
        return [tree.draw(canvas) for tree in self._trees]

    def tree_types(self) -> list[IntrinsicRecord]:
        """Distinct shared records referenced by this forest, in first-use order.

        Distinctness is by identity, so this exposes how much sharing happened.
        """
        seen: dict[int, IntrinsicRecord] = {}
        for tree in self._trees:
            seen.setdefault(id(tree.tree_type), tree.tree_type)
        return list(seen.values())

    def dump(self) -> list[dict[str, Any]]:
        """Describe every tree, including the identity of its shared type."""
        return [tree.describe() for tree in self._trees]

    def __len__(self) -> int:
        return len(self._trees)

    def __iter__(self) -> Iterator[Tree]:
        return iter(self._trees)
