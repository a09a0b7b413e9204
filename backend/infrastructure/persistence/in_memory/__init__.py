"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.settings_store import (
    InMemorySettingsStore,
)

__all__ = [
    "InMemorySettingsStore",
]
