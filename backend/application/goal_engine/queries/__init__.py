"""Goal engine queries."""

from .daily_progress import (
    DailyGoals,
    DailyProgress,
    NutrientTotals,
    calculate_progress,
    clamp_calorie_goal,
    progress_fraction,
)

__all__ = [
    "DailyGoals",
    "DailyProgress",
    "NutrientTotals",
    "calculate_progress",
    "clamp_calorie_goal",
    "progress_fraction",
]
