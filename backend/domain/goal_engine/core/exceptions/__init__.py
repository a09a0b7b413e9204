"""Domain exceptions for the goal engine."""

from .domain_errors import (
    GoalEngineError,
    InvalidConfigurationError,
    SettingsStoreError,
)

__all__ = [
    "GoalEngineError",
    "SettingsStoreError",
    "InvalidConfigurationError",
]
