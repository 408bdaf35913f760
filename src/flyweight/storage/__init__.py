"""Registry backends."""

from flyweight.storage.local import ArityError, LocalRegistry, tree_type_registry
from flyweight.storage.models import RegistryStats
from flyweight.storage.protocol import Registry

__all__ = [
    "Registry",
    "LocalRegistry",
    "RegistryStats",
    "ArityError",
    "tree_type_registry",
]
