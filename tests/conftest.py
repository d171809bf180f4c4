"""
Pytest configuration and shared test utilities.

This module provides shared fixtures for all entity-naming tests.
"""

import pytest

from entity_naming.base.config import NamingConfig
from entity_naming.registry import TypeRegistry
from entity_naming.state import NamingService, reset_service
from entity_naming.utils.config import CONFIG_ENV_VAR, reset_config

# ===================================================================
# Isolation
# ===================================================================


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run every test in an empty directory with no settings file or default service.

    The process-default service and the settings cache are module globals, so
    they are dropped before and after each test.
    """
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config()
    reset_service()
    yield
    reset_config()
    reset_service()


# ===================================================================
# Factories
# ===================================================================


def write_settings(directory, text: str, filename: str = "entity_naming.yml"):
    """Write a settings file and return its path."""
    path = directory / filename
    path.write_text(text)
    return path


@pytest.fixture
def config():
    return NamingConfig()


@pytest.fixture
def registry(config):
    return TypeRegistry(config)


@pytest.fixture
def service():
    """A fresh service that is not the process default."""
    return NamingService()
