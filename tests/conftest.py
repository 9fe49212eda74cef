"""Pytest configuration and shared fixtures for all tests."""

# Add project root and the sample component packages to path
import sys
from pathlib import Path
from typing import List

import pytest
from loguru import logger

sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent / "fixtures"))

from beanctx.config import BeanContextSettings


@pytest.fixture(autouse=True)
def quiet_logging():
    """Drop loguru sinks so tests don't write to closed capture streams."""
    logger.remove()
    yield
    logger.remove()


@pytest.fixture
def log_messages() -> List[str]:
    """Collect formatted loguru messages emitted during a test."""
    messages: List[str] = []
    logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    return messages


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove BEANCTX_ variables leaking in from the outer environment."""
    import os

    for key in list(os.environ):
        if key.upper().startswith("BEANCTX_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings() -> BeanContextSettings:
    """Default settings with no base package."""
    return BeanContextSettings()


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: tests spanning discovery and resolution")
