"""Calculation services for the goal engine."""

from .bmr_service import BMRService
from .macro_service import MacroService
from .maintenance_service import MaintenanceService
from .rounding import round_half_away
from .target_service import TargetService, format_rate

__all__ = [
    "BMRService",
    "MaintenanceService",
    "TargetService",
    "MacroService",
    "round_half_away",
    "format_rate",
]
