"""Configuration settings using Pydantic Settings.

Usage:
    from flyweight.config import RegistrySettings

    # Load from environment variables (FLYWEIGHT_*)
    settings = RegistrySettings()

    # Or override with explicit values
    settings = RegistrySettings(key_scheme="hashed")
"""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from flyweight.core.identity import KeyScheme


class RegistrySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for interning registries.

    Attributes:
        key_scheme: How field tuples are encoded into keys (length_prefixed, hashed).
        thread_safe: Guard check-then-insert with a lock.
        log_level: Level applied to the "flyweight" logger by configure_logging().

    Environment Variables:
        FLYWEIGHT_KEY_SCHEME
        FLYWEIGHT_THREAD_SAFE
        FLYWEIGHT_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="FLYWEIGHT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    key_scheme: KeyScheme = KeyScheme.LENGTH_PREFIXED
    thread_safe: bool = True
    log_level: str = "WARNING"

    @field_validator("key_scheme", mode="before")
    @classmethod
    def _parse_key_scheme(cls, value: object) -> object:
        if isinstance(value, str):
            return KeyScheme.parse(value)
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}")
        return level


def configure_logging(settings: RegistrySettings | None = None) -> logging.Logger:
    """Apply the configured level to the package logger.

    Only the level is set; handlers are left to the application.

    Returns:
        The "flyweight" logger.
    """
    settings = settings or RegistrySettings()
    package_logger = logging.getLogger("flyweight")
    package_logger.setLevel(settings.log_level)
    return package_logger
