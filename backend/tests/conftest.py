"""Shared test fixtures.

Loads ``.env.test`` when present so local overrides apply to every test
run, and exposes a fresh in-memory settings store.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from infrastructure.persistence.in_memory.settings_store import (
    InMemorySettingsStore,
)
from infrastructure.persistence.settings_store_factory import reset_settings_store

env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)


@pytest.fixture
def settings_store() -> InMemorySettingsStore:
    """Empty in-memory settings store."""
    return InMemorySettingsStore()


@pytest.fixture(autouse=True)
def reset_store_singleton():
    """Reset the process-wide store between tests."""
    reset_settings_store()
    yield
    reset_settings_store()
