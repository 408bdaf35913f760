"""Tests for registry settings."""

import logging

import pytest
from pydantic import ValidationError

from flyweight.config import RegistrySettings, configure_logging
from flyweight.core.identity import KeyScheme


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("FLYWEIGHT_KEY_SCHEME", "FLYWEIGHT_THREAD_SAFE", "FLYWEIGHT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_package_logger():
    package_logger = logging.getLogger("flyweight")
    level = package_logger.level
    yield package_logger
    package_logger.setLevel(level)


def test_defaults(clean_env):
    settings = RegistrySettings(_env_file=None)

    assert settings.key_scheme is KeyScheme.LENGTH_PREFIXED
    assert settings.thread_safe is True
    assert settings.log_level == "WARNING"


def test_environment_overrides(clean_env, monkeypatch):
    monkeypatch.setenv("FLYWEIGHT_KEY_SCHEME", "hashed")
    monkeypatch.setenv("FLYWEIGHT_THREAD_SAFE", "false")
    monkeypatch.setenv("FLYWEIGHT_LOG_LEVEL", "debug")

    settings = RegistrySettings(_env_file=None)

    assert settings.key_scheme is KeyScheme.HASHED
    assert settings.thread_safe is False
    assert settings.log_level == "DEBUG"


def test_explicit_values_accept_enum(clean_env):
    settings = RegistrySettings(_env_file=None, key_scheme=KeyScheme.HASHED)
    assert settings.key_scheme is KeyScheme.HASHED


def test_unknown_key_scheme_rejected(clean_env):
    with pytest.raises(ValidationError, match="Unknown key scheme"):
        RegistrySettings(_env_file=None, key_scheme="concat")


def test_unknown_log_level_rejected(clean_env):
    with pytest.raises(ValidationError, match="Unknown log level"):
        RegistrySettings(_env_file=None, log_level="LOUD")


def test_configure_logging_sets_package_level(clean_env, restore_package_logger):
    configured = configure_logging(RegistrySettings(_env_file=None, log_level="info"))

    assert configured is restore_package_logger
    assert configured.level == logging.INFO
