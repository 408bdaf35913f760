"""Core type definitions for flyweight."""

type Fields = tuple[str, ...]
"""Ordered field values that fully determine an intrinsic record."""

type SharedRef[T] = T
"""Type alias indicating a value is a shared, registry-owned reference.

When you see `SharedRef[T]` in a signature, the object is owned by a registry
and may be referenced by many consumers at once. Never mutate it and never
treat it as owned by the holder.
"""
