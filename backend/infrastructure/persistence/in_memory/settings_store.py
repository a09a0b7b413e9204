"""In-memory implementation of ISettingsStore for testing."""

from typing import Any, Mapping, Optional

from domain.goal_engine.core.ports.settings_store import ISettingsStore


class InMemorySettingsStore(ISettingsStore):
    """
    In-memory implementation of the settings store.

    Uses a dictionary to store values in memory. Suitable for testing
    and development. Data is lost when the application stops.
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None) -> None:
        """Initialize the store, optionally pre-populated."""
        self._values: dict[str, Any] = dict(initial or {})
        self.write_count = 0

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set_many(self, values: Mapping[str, Any]) -> None:
        self._values.update(values)
        self.write_count += 1

    def snapshot(self) -> dict[str, Any]:
        """Copy of all stored values (for testing)."""
        return dict(self._values)

    def clear(self) -> None:
        """Clear all values (for testing)."""
        self._values.clear()
        self.write_count = 0
