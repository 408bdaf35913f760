"""flyweight: interned intrinsic state shared across many lightweight entities.

Usage:
    from flyweight import Forest, LocalRegistry, TreeType

    registry = LocalRegistry(record_factory=TreeType, arity=3)
    forest = Forest(registry=registry)
    for x, y in [(10, 20), (3, 25), (7, 50)]:
        forest.plant_tree(x, y, "Oak", "Brown", "oak.jpg")

    assert len(registry) == 1
    forest.draw("Monitor")
"""

__version__ = "0.1.0"

# Configuration
from flyweight.config import RegistrySettings, configure_logging

# Core primitives
from flyweight.core import (
    Fields,
    IntrinsicRecord,
    InvalidFieldsError,
    KeyScheme,
    RegistryKey,
    SharedRef,
    TreeType,
    make_key,
)

# Consumers
from flyweight.forest import Forest, Position, Tree

# Storage
from flyweight.storage import (
    ArityError,
    LocalRegistry,
    Registry,
    RegistryStats,
    tree_type_registry,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Fields",
    "SharedRef",
    "KeyScheme",
    "RegistryKey",
    "InvalidFieldsError",
    "make_key",
    "IntrinsicRecord",
    "TreeType",
    # Storage
    "Registry",
    "LocalRegistry",
    "RegistryStats",
    "ArityError",
    "tree_type_registry",
    # Forest
    "Position",
    "Tree",
    "Forest",
    # Config
    "RegistrySettings",
    "configure_logging",
]
