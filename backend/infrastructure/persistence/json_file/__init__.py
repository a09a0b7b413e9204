"""JSON file persistence implementations."""

from infrastructure.persistence.json_file.settings_store import (
    JsonFileSettingsStore,
)

__all__ = [
    "JsonFileSettingsStore",
]
