"""Factory for creating settings store instances."""

from typing import Optional

import structlog

from domain.goal_engine.core.ports.settings_store import ISettingsStore
from infrastructure.config import GoalEngineSettings
from infrastructure.persistence.in_memory.settings_store import (
    InMemorySettingsStore,
)
from infrastructure.persistence.json_file.settings_store import (
    JsonFileSettingsStore,
)

logger = structlog.get_logger(__name__)

# Singleton instance
_settings_store: Optional[ISettingsStore] = None


def create_settings_store(settings: Optional[GoalEngineSettings] = None) -> ISettingsStore:
    """
    Create settings store based on GOAL_STORE_BACKEND configuration.

    Environment Variables:
        GOAL_STORE_BACKEND: 'inmemory' or 'json'
        GOAL_STORE_PATH: JSON file path (used when backend is 'json')

    Returns:
        ISettingsStore implementation

    Default:
        Returns InMemorySettingsStore if GOAL_STORE_BACKEND not set
    """
    settings = settings or GoalEngineSettings.from_env()
    backend = settings.store_backend

    if backend == "json":
        return JsonFileSettingsStore(settings.store_path)

    if backend != "inmemory":
        # Unknown type - graceful fallback to inmemory
        logger.warning("Unknown GOAL_STORE_BACKEND, using inmemory", backend=backend)
    return InMemorySettingsStore()


def get_settings_store() -> ISettingsStore:
    """
    Get singleton settings store instance.

    Returns:
        ISettingsStore singleton
    """
    global _settings_store

    if _settings_store is None:
        _settings_store = create_settings_store()

    return _settings_store


def reset_settings_store() -> None:
    """Reset singleton (for testing)."""
    global _settings_store
    _settings_store = None
