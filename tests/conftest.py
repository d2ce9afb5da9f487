"""Pytest configuration and shared fixtures."""
import logging

import pytest

from agichat.logging_utils import LOGGER_NAME
from agichat.session import SettingsStore, ViewController
from agichat.storage import create_kv_store


@pytest.fixture
def storage():
    """In-memory key-value storage."""
    return create_kv_store("memory")


@pytest.fixture
def settings_store(storage):
    return SettingsStore(storage)


@pytest.fixture
def views():
    return ViewController()


@pytest.fixture
def storage_path(tmp_path, monkeypatch):
    """Point the CLI's file storage at a temporary location."""
    path = tmp_path / "storage.json"
    monkeypatch.setenv("AGICHAT_STORAGE", "file")
    monkeypatch.setenv("AGICHAT_STORAGE_PATH", str(path))
    return path


@pytest.fixture(autouse=True)
def isolated_package_logger():
    """Restore the agichat logger after tests that install handlers."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
