"""Ports for the goal engine domain."""

from .calculators import (
    IBMRCalculator,
    IMacroCalculator,
    IMaintenanceCalculator,
    ITargetCalculator,
)
from .settings_store import ISettingsStore, SettingsKeys

__all__ = [
    "IBMRCalculator",
    "IMaintenanceCalculator",
    "ITargetCalculator",
    "IMacroCalculator",
    "ISettingsStore",
    "SettingsKeys",
]
