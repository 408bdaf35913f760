"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from flyweight import Forest, LocalRegistry, tree_type_registry
from flyweight.config import RegistrySettings


@pytest.fixture
def registry():
    """Fresh TreeType registry, ignoring any .env file."""
    return tree_type_registry(RegistrySettings(_env_file=None))


@pytest.fixture
def plain_registry():
    """Fresh registry of plain IntrinsicRecords with any arity."""
    return LocalRegistry()


@pytest.fixture
def forest(registry):
    """Empty forest backed by the registry fixture."""
    return Forest(registry=registry)
