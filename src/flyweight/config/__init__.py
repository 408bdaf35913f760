"""Configuration module using Pydantic Settings.

Provides typed registry configuration with environment variable support.

Usage:
    from flyweight.config import RegistrySettings

    settings = RegistrySettings(key_scheme="hashed", thread_safe=False)
"""

from flyweight.config.settings import RegistrySettings, configure_logging

__all__ = [
    "RegistrySettings",
    "configure_logging",
]
