"""Flyweight consumers: trees and the forests that hold them.

Architecture Note:
    forest/ holds per-instance extrinsic state. Every Tree references a
    TreeType owned by a registry in storage/; nothing here creates records.
"""

from flyweight.forest.entity import Position, Tree
from flyweight.forest.forest import Forest

__all__ = [
    "Position",
    "Tree",
    "Forest",
]
